from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable

from . import config
from .question_bank import PILLARS, load_bank
from .types import Question

log = logging.getLogger(__name__)


def _blank_pillar() -> dict[str, object]:
    return {"questions": 0, "reversed": 0, "skills": {}}


def audit_items(items: Iterable[Question]) -> dict[str, object]:
    coverage: dict[str, dict[str, object]] = {pillar: _blank_pillar() for pillar in PILLARS}
    totals = {"questions": 0, "reversed": 0, "skills": 0}
    warnings: list[str] = []
    seen_ids: set[str] = set()
    skill_home: dict[str, str] = {}

    for item in items:
        totals["questions"] += 1
        if item.id in seen_ids:
            warnings.append(f"duplicate question id {item.id}")
        seen_ids.add(item.id)

        if item.pillar not in PILLARS:
            warnings.append(f"{item.id} has unknown pillar {item.pillar}")
        pillar_data = coverage.setdefault(item.pillar, _blank_pillar())
        pillar_data["questions"] += 1  # type: ignore[operator]
        if item.reversed:
            pillar_data["reversed"] += 1  # type: ignore[operator]
            totals["reversed"] += 1

        skills: dict[str, int] = pillar_data["skills"]  # type: ignore[assignment]
        skills[item.skill] = skills.get(item.skill, 0) + 1

        home = skill_home.setdefault(item.skill, item.pillar)
        if home != item.pillar:
            warnings.append(f"skill {item.skill!r} appears in both {home} and {item.pillar}")

    for pillar, data in coverage.items():
        count = data["questions"]
        if count < config.BANK_MIN_PER_PILLAR:
            warnings.append(f"{pillar} has {count} questions (<{config.BANK_MIN_PER_PILLAR})")
        if config.BANK_EXPECT_REVERSED and count and not data["reversed"]:
            warnings.append(f"{pillar} has no reversed questions")
        totals["skills"] += len(data["skills"])  # type: ignore[arg-type]

    summary = {"coverage": coverage, "warnings": warnings, "totals": totals}
    return summary


def print_report(summary: dict[str, object]) -> None:
    coverage: dict[str, dict[str, object]] = summary["coverage"]  # type: ignore[assignment]
    print("=== Question Bank ===")
    for pillar in coverage:
        data = coverage[pillar]
        print(f"\nPillar: {pillar}  questions={data['questions']}  reversed={data['reversed']}")
        skills: dict[str, int] = data["skills"]  # type: ignore[assignment]
        for skill, n in skills.items():
            print(f"  {skill:<28s}{n:3d}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")

    totals = summary["totals"]
    print("\nTotals:", totals)


def write_summary(summary: dict[str, object], path: Path = Path("/tmp/bank_audit.json")) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    log.info("bank audit written to %s", path)
    return text


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Audit the shipped question bank.")
    ap.add_argument("--out", default="/tmp/bank_audit.json", help="where to write the JSON summary")
    args = ap.parse_args(argv)

    items = load_bank()
    summary = audit_items(items)
    print_report(summary)
    write_summary(summary, path=Path(args.out))
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
