# ei_core/labels.py
from .config import LEVEL_THRESHOLDS, LEVEL_FALLBACK, BAND_THRESHOLDS, BAND_FALLBACK

_PILLAR_LABELS = {
    "KNOW_YOURSELF": "Know Yourself",
    "CHOOSE_YOURSELF": "Choose Yourself",
    "GIVE_YOURSELF": "Give Yourself",
}

_PILLAR_DESCRIPTIONS = {
    "KNOW_YOURSELF": "Awareness of emotions, triggers, and patterns.",
    "CHOOSE_YOURSELF": "Managing reactions, motivation, and decisions.",
    "GIVE_YOURSELF": "Empathy, trust, and positive impact on others.",
}

def level_label(overall_pct: float) -> str:
    s = float(overall_pct)
    for floor, label in LEVEL_THRESHOLDS:
        if s >= floor: return label
    return LEVEL_FALLBACK

def band_label(pct: float) -> str:
    # separate scale from level_label; 50 is "Medium" but only "Developing"
    s = float(pct)
    for floor, label in BAND_THRESHOLDS:
        if s >= floor: return label
    return BAND_FALLBACK

def pillar_label(pillar: str) -> str:
    return _PILLAR_LABELS.get(pillar, pillar)

def pillar_description(pillar: str) -> str:
    return _PILLAR_DESCRIPTIONS.get(pillar, "")
