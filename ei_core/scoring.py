from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
import math
from . import config
from .labels import level_label
from .question_bank import PILLARS, QUESTIONS
from .types import Question, ScoredResponse, SkillScore, Result

def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))

def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def _likert(raw: Any) -> Optional[int]:
    """
    Coerce a raw answer to a Likert int, or None when it can't count.
    Booleans and non-numeric values are dropped; out-of-range ints are
    clamped when config.CLAMP_OUT_OF_RANGE is on, dropped otherwise.
    """
    if raw is None or isinstance(raw, bool):
        return None
    try:
        v = int(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if config.CLAMP_OUT_OF_RANGE:
        return int(_clamp(v, config.LIKERT_MIN, config.LIKERT_MAX))
    if config.LIKERT_MIN <= v <= config.LIKERT_MAX:
        return v
    return None

def reverse_likert(v: int) -> int:
    # 1<->5, 2<->4, 3->3
    return (config.LIKERT_MIN + config.LIKERT_MAX) - int(v)

def effective_value(question: Question, raw: int) -> int:
    return reverse_likert(raw) if question.reversed else int(raw)

def to_pct(avg_likert: float) -> int:
    """Likert average 1..5 -> 0..100 (1->0, 3->50, 5->100)."""
    span = config.LIKERT_MAX - config.LIKERT_MIN
    pct = ((float(avg_likert) - config.LIKERT_MIN) / span) * 100
    return int(_clamp(_round_half_up(pct), 0, 100))

def _mean(values: Sequence[int]) -> float:
    return sum(values) / len(values) if values else 0.0

def score_responses(bank: Sequence[Question], answers: Mapping[str, Any]) -> List[ScoredResponse]:
    """
    One ScoredResponse per answered bank question, in bank order.
    Only bank ids are looked up, so stray keys in `answers` never count.
    """
    scored: List[ScoredResponse] = []
    for q in bank:
        raw = _likert(answers.get(q.id))
        if raw is None:
            continue
        scored.append(ScoredResponse(question=q, raw=raw, value=effective_value(q, raw)))
    return scored

def _pillar_scores(scored: Sequence[ScoredResponse]) -> Dict[str, int]:
    sums: Dict[str, int] = {p: 0 for p in PILLARS}
    counts: Dict[str, int] = {p: 0 for p in PILLARS}
    for s in scored:
        p = s.question.pillar
        sums[p] = sums.get(p, 0) + s.value
        counts[p] = counts.get(p, 0) + 1
    # a pillar with nothing answered reads 0, same as an all-minimum pillar
    return {p: (to_pct(sums[p] / counts[p]) if counts[p] else 0) for p in sums}

def _skill_scores(scored: Sequence[ScoredResponse]) -> List[SkillScore]:
    groups: Dict[Tuple[str, str], List[int]] = {}
    for s in scored:
        groups.setdefault((s.question.pillar, s.question.skill), []).append(s.value)
    return [
        SkillScore(pillar=pillar, skill=skill, score_pct=to_pct(_mean(vals)))  # type: ignore[arg-type]
        for (pillar, skill), vals in groups.items()
    ]

def compute_result(bank: Sequence[Question], answers: Mapping[str, Any]) -> Result:
    """
    Turn raw Likert answers into the overall / pillar / skill breakdown.

    Unanswered questions are left out of every average. Skills are ranked
    by score with a stable sort, so ties keep first-appearance order; the
    growth list is the ranked list read backwards and may overlap the top
    list when few skills have answers.
    """
    scored = score_responses(bank, answers)
    overall_pct = to_pct(_mean([s.value for s in scored]))

    ranked = sorted(_skill_scores(scored), key=lambda s: s.score_pct, reverse=True)
    top_n = max(0, int(config.TOP_N))

    return Result(
        overall_pct=overall_pct,
        pillar_pct=_pillar_scores(scored),
        skills=ranked,
        top_skills=ranked[:top_n],
        growth_skills=list(reversed(ranked))[:top_n],
        level=level_label(overall_pct),
        answered=len(scored),
    )

def score_answers(answers: Mapping[str, Any]) -> Result:
    return compute_result(QUESTIONS, answers)
