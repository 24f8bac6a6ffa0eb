# ei_core/session.py
from __future__ import annotations
from typing import Dict, List, Optional, Sequence
import logging

from . import config
from .question_bank import QUESTIONS
from .scoring import compute_result
from .types import Question, Result, Step


log = logging.getLogger(__name__)


class AssessmentSession:
    """
    One pass through the question bank, one question per screen.

    Holds the answer map and the cursor only; the result is recomputed from
    the answers every time it is asked for.
    """

    def __init__(self, bank: Optional[Sequence[Question]] = None, user_id: Optional[str] = None):
        self.bank: List[Question] = list(bank if bank is not None else QUESTIONS)
        self.user_id = user_id
        self.step: Step = "INTRO"
        self.idx: int = 0
        self.answers: Dict[str, int] = {}

    @property
    def total(self) -> int:
        return len(self.bank)

    def start(self) -> Optional[Question]:
        self.step = "TEST"
        self.idx = 0
        return self.current()

    def current(self) -> Optional[Question]:
        if self.step != "TEST" or not self.bank:
            return None
        return self.bank[self.idx]

    def answer(self, value: int, item_id: Optional[str] = None) -> None:
        q = self.current()
        if q is None:
            raise ValueError("no question is open")
        if item_id is not None and item_id != q.id:
            raise ValueError(f"expected an answer for {q.id}, got {item_id}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("answer must be an integer")
        if not config.LIKERT_MIN <= value <= config.LIKERT_MAX:
            raise ValueError(f"answer must be between {config.LIKERT_MIN} and {config.LIKERT_MAX}")
        # revisiting a question overwrites the earlier answer
        self.answers[q.id] = value

    def can_advance(self) -> bool:
        q = self.current()
        return q is not None and q.id in self.answers

    def advance(self) -> bool:
        if not self.can_advance():
            return False
        if self.idx < self.total - 1:
            self.idx += 1
        else:
            self.step = "RESULTS"
            log.info("assessment finished: user=%s answered=%d", self.user_id, len(self.answers))
        return True

    def back(self) -> bool:
        if self.step == "RESULTS" and self.bank:
            self.step = "TEST"
            self.idx = self.total - 1
            return True
        if self.step == "TEST" and self.idx > 0:
            self.idx -= 1
            return True
        return False

    def restart(self) -> None:
        self.answers = {}
        self.idx = 0
        self.step = "INTRO"

    def progress_pct(self) -> int:
        if self.total == 0:
            return 0
        answered = sum(1 for q in self.bank if q.id in self.answers)
        return max(0, min(100, int(answered * 100 / self.total + 0.5)))

    def result(self) -> Result:
        return compute_result(self.bank, self.answers)
