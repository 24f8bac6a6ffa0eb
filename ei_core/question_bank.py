from __future__ import annotations
import json, importlib.resources as ir
from typing import Dict, List, Tuple
from .types import Question
PILLARS = ["KNOW_YOURSELF","CHOOSE_YOURSELF","GIVE_YOURSELF"]
LIKERT_OPTIONS: List[Tuple[int, str]] = [
    (1, "Strongly disagree"),
    (2, "Disagree"),
    (3, "Neutral"),
    (4, "Agree"),
    (5, "Strongly agree"),
]
def load_bank() -> List[Question]:
    data = ir.files(__package__).joinpath("data/bank.json").read_text(encoding="utf-8")
    raw = json.loads(data)
    return [Question(**r) for r in raw]
# fixed for the life of the process; tools and tests use load_bank() for a copy
QUESTIONS: Tuple[Question, ...] = tuple(load_bank())
QUESTIONS_BY_ID: Dict[str, Question] = {q.id: q for q in QUESTIONS}
