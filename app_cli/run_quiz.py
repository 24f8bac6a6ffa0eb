from __future__ import annotations
import json, logging, os, datetime
from ei_core.question_bank import LIKERT_OPTIONS
from ei_core.labels import pillar_label, band_label
from ei_core.reporting import persistence_record, result_to_dict
from ei_core.session import AssessmentSession
def ask(prompt: str) -> str:
    print(prompt)
    for v, label in LIKERT_OPTIONS: print(f"  [{v}] {label}")
    return input("Your choice (1-5, b=back): ").strip().lower()
def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    print("EI Assessment: 20 questions across Know, Choose and Give Yourself.")
    session = AssessmentSession(user_id=os.getenv("EI_USER_ID"))
    session.start()
    while session.step == "TEST":
        q = session.current()
        print(f"\nQuestion {session.idx + 1} / {session.total}  ({session.progress_pct()}% completed)")
        print(f"{pillar_label(q.pillar)} - {q.skill}")
        v = ask(q.text)
        if v == "b":
            session.back(); continue
        try:
            session.answer(int(v))
        except ValueError:
            print("Enter a number between 1 and 5."); continue
        session.advance()
    res = session.result(); data = result_to_dict(res)
    print(f"\nOverall: {res.overall_pct}% ({res.level})")
    for p in data["pillars"]: print(f"  {p['label']:<16s}{p['score_pct']:4d}%  {p['band']}")
    print("Strengths:", ", ".join(s["skill"] for s in data["strengths"]))
    print("Growth areas:", ", ".join(s["skill"] for s in data["growth_areas"]))
    os.makedirs("reports", exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = os.path.join("reports", f"ei_result_{ts}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"result": data, "record": persistence_record(session.user_id or "local", res, session.answers)}, f, indent=2)
    print(f"Done. Result saved to: {path}  (overall band: {band_label(res.overall_pct)})")
if __name__ == "__main__": main()
