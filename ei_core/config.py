from __future__ import annotations
import os, json, pathlib


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


LIKERT_MIN: int = 1
LIKERT_MAX: int = 5

# strengths / growth areas shown on the result screen
TOP_N: int = 2

# (floor, label), checked top-down; floors are inclusive
LEVEL_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (80, "Excellent"),
    (65, "Strong"),
    (45, "Developing"),
)
LEVEL_FALLBACK: str = "Needs Attention"

BAND_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (75, "High"),
    (50, "Medium"),
)
BAND_FALLBACK: str = "Low"

# out-of-range raw values are pulled back into [LIKERT_MIN, LIKERT_MAX]
CLAMP_OUT_OF_RANGE: bool = True

BANK_MIN_PER_PILLAR: int = 6
BANK_EXPECT_REVERSED: bool = True

SAVE_RESULTS_ENABLED: bool = True

# // env overrides for staging/ops
TOP_N = _env_int("TOP_N", TOP_N)
CLAMP_OUT_OF_RANGE = _env_bool("CLAMP_OUT_OF_RANGE", CLAMP_OUT_OF_RANGE)
BANK_MIN_PER_PILLAR = _env_int("BANK_MIN_PER_PILLAR", BANK_MIN_PER_PILLAR)
SAVE_RESULTS_ENABLED = _env_bool("SAVE_RESULTS_ENABLED", SAVE_RESULTS_ENABLED)


def load_config() -> dict:
    cfg = {}
    p = pathlib.Path("config.json")
    if p.exists():
        try: cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError): cfg = {}
    e = os.environ
    if e.get("SAVE_RESULTS_ENABLED") is not None:
        cfg["SAVE_RESULTS_ENABLED"] = _env_bool("SAVE_RESULTS_ENABLED", SAVE_RESULTS_ENABLED)
    if e.get("DATA_DIR"): cfg["DATA_DIR"] = e.get("DATA_DIR")
    if e.get("ALLOWED_EMAIL_DOMAINS"): cfg["ALLOWED_EMAIL_DOMAINS"] = e.get("ALLOWED_EMAIL_DOMAINS")
    cfg["INVITE_CONFIGURED"] = bool(e.get("INVITE_CODE_SALT") and e.get("HR_INVITE_HASH"))
    cfg.setdefault("SAVE_RESULTS_ENABLED", SAVE_RESULTS_ENABLED)
    return cfg
