# ei_core/reporting.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from .labels import band_label, pillar_description, pillar_label
from .question_bank import PILLARS
from .types import Result, SkillScore

# -------- utils: make any object JSON-safe ----------
def _to_basic(x: Any) -> Any:
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, dict):
        return {str(k): _to_basic(v) for k, v in x.items()}
    if isinstance(x, (list, tuple, set)):
        return [_to_basic(v) for v in x]
    if hasattr(x, "__dict__"):
        return _to_basic(vars(x))
    return str(x)

def _skill_row(s: SkillScore) -> Dict[str, Any]:
    return {
        "pillar": s.pillar,
        "pillar_label": pillar_label(s.pillar),
        "skill": s.skill,
        "score_pct": s.score_pct,
        "band": band_label(s.score_pct),
    }

# -------- display payload ----------
def result_to_dict(result: Result) -> Dict[str, Any]:
    """
    Plain dict for the display layer. Band labels are attached to every
    score; the level only describes the overall score.
    """
    pillars = []
    for p in list(PILLARS) + [k for k in result.pillar_pct if k not in PILLARS]:
        pct = int(result.pillar_pct.get(p, 0))
        pillars.append({
            "pillar": p,
            "label": pillar_label(p),
            "description": pillar_description(p),
            "score_pct": pct,
            "band": band_label(pct),
        })
    return {
        "overall": {
            "score_pct": result.overall_pct,
            "band": band_label(result.overall_pct),
            "level": result.level,
        },
        "level": result.level,
        "answered": result.answered,
        "pillars": pillars,
        "skills": [_skill_row(s) for s in result.skills],
        "strengths": [_skill_row(s) for s in result.top_skills],
        "growth_areas": [_skill_row(s) for s in result.growth_skills],
    }

# -------- record for the results store ----------
def persistence_record(
    user_id: str,
    result: Result,
    answers: Mapping[str, Any],
    created_at: Optional[str] = None,
) -> Dict[str, Any]:
    """
    The row written when a user saves a result: overall and pillar
    percentages plus the raw answers. The skill breakdown is not stored,
    it can always be recomputed from answers_json.
    """
    return {
        "user_id": user_id,
        "overall_score": result.overall_pct,
        "know_yourself": int(result.pillar_pct.get("KNOW_YOURSELF", 0)),
        "choose_yourself": int(result.pillar_pct.get("CHOOSE_YOURSELF", 0)),
        "give_yourself": int(result.pillar_pct.get("GIVE_YOURSELF", 0)),
        "answers_json": _to_basic(dict(answers)),
        "created_at": created_at or datetime.now(timezone.utc).isoformat(),
    }
