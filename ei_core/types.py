from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Literal
Pillar = Literal["KNOW_YOURSELF","CHOOSE_YOURSELF","GIVE_YOURSELF"]
Step = Literal["INTRO","TEST","RESULTS"]
@dataclass(frozen=True)
class Question:
    id: str; pillar: Pillar; skill: str; text: str
    reversed: bool = False
@dataclass(frozen=True)
class ScoredResponse:
    question: Question
    raw: int
    value: int
@dataclass(frozen=True)
class SkillScore:
    pillar: Pillar; skill: str; score_pct: int
@dataclass
class Result:
    overall_pct: int
    pillar_pct: Dict[str, int]
    skills: List[SkillScore]
    top_skills: List[SkillScore]
    growth_skills: List[SkillScore]
    level: str
    answered: int = 0
