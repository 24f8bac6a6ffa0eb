# autoplay.py
from __future__ import annotations
import argparse, json, random, datetime, logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence
from ei_core.question_bank import load_bank
from ei_core.reporting import result_to_dict
from ei_core.scoring import compute_result
from ei_core.types import Question

log = logging.getLogger("autoplay")

PROFILES = ("min", "max", "neutral", "random", "consistent-high", "consistent-low")

def _new_run_id() -> str:
    return datetime.datetime.now().strftime("run_%Y%m%d_%H%M%S")

def build_answers(bank: Sequence[Question], profile: str, seed: Optional[int] = None,
                  skip: float = 0.0) -> Dict[str, int]:
    """
    Synthetic answer map for a respondent profile.
    min/max/neutral answer every question with 1/5/3 as written; the
    consistent-* profiles answer reversed questions the other way round so
    the effective value is uniform. `skip` leaves a fraction unanswered.
    """
    rng = random.Random(seed)
    answers: Dict[str, int] = {}
    for q in bank:
        if skip and rng.random() < skip:
            continue
        if profile == "min": v = 1
        elif profile == "max": v = 5
        elif profile == "neutral": v = 3
        elif profile == "consistent-high": v = 1 if q.reversed else 5
        elif profile == "consistent-low": v = 5 if q.reversed else 1
        elif profile == "random": v = rng.randint(1, 5)
        else: raise ValueError(f"unknown profile {profile!r}")
        answers[q.id] = v
    return answers

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Score a synthetic respondent against the question bank.")
    ap.add_argument("--profile", choices=PROFILES, default="random")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--skip", type=float, default=0.0, help="fraction of questions left unanswered")
    ap.add_argument("--out", default=None, help="write JSON here instead of stdout")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    bank = load_bank()
    answers = build_answers(bank, args.profile, seed=args.seed, skip=args.skip)
    res = compute_result(bank, answers)
    payload = {"run_id": _new_run_id(), "profile": args.profile, "answers": answers, "result": result_to_dict(res)}
    text = json.dumps(payload, indent=2)
    if args.out:
        out = Path(args.out); out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        log.info("profile=%s overall=%d level=%s -> %s", args.profile, res.overall_pct, res.level, out)
    else:
        print(text)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
