from __future__ import annotations

import pytest

from ei_core.question_bank import PILLARS, load_bank
from ei_core.types import Question


def build_bank(
    *,
    pillars: list[str] | None = None,
    skills_per_pillar: int = 2,
    questions_per_skill: int = 2,
    reversed_every: int = 0,
) -> list[Question]:
    """Create a deterministic synthetic bank for tests.

    ``reversed_every=n`` marks every n-th question of each pillar as reversed.
    """

    items: list[Question] = []
    for pillar in pillars or list(PILLARS):
        n = 0
        for s in range(skills_per_pillar):
            for k in range(questions_per_skill):
                n += 1
                items.append(
                    Question(
                        id=f"{pillar}_s{s}_q{k}",
                        pillar=pillar,  # type: ignore[arg-type]
                        skill=f"{pillar} skill {s}",
                        text=f"{pillar} statement {s}.{k}",
                        reversed=bool(reversed_every) and n % reversed_every == 0,
                    )
                )
    return items


def answer_all(bank: list[Question], value: int) -> dict[str, int]:
    return {q.id: value for q in bank}


@pytest.fixture
def bank() -> list[Question]:
    return load_bank()


@pytest.fixture
def synthetic_bank() -> list[Question]:
    return build_bank(reversed_every=2)
