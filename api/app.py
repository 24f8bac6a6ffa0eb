from __future__ import annotations
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import logging, os, uuid, typing as t

# ---- Engine imports ----
from ei_core.config import load_config
from ei_core.invites import check_invite, validate_signup
from ei_core.labels import pillar_label
from ei_core.question_bank import LIKERT_OPTIONS, QUESTIONS
from ei_core.reporting import persistence_record, result_to_dict
from ei_core.scoring import score_answers
from ei_core.session import AssessmentSession
from ei_core.types import Question
from .storage import (
    DATA_ROOT,
    create_profile_if_new,
    list_results_for_user,
    load_profile,
    load_result,
    save_result,
)

log = logging.getLogger(__name__)

SESS: dict[str, AssessmentSession] = {}

app = FastAPI(title="EI Assessment API")

@app.get("/")
def root():
    return {"status": "ok", "service": "ei-assessment-api"}

ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class StartReq(BaseModel):
    user_id: str | None = None

class AnswerReq(BaseModel):
    item_id: str
    value: int = Field(ge=1, le=5)

class ScoreReq(BaseModel):
    answers: dict[str, int] = Field(default_factory=dict)

class InviteReq(BaseModel):
    invite_code: str = ""

class SignupReq(BaseModel):
    full_name: str = ""
    email: str = ""
    role: str = ""
    department: str | None = None
    invite_code: str | None = None

# ---- Helpers ----
def _serialize_question(q: Question | None, index: int | None = None):
    if q is None: return None
    return {
        "id": q.id,
        "index": index,
        "pillar": q.pillar,
        "pillar_label": pillar_label(q.pillar),
        "skill": q.skill,
        "text": q.text,
        "options": [{"value": v, "label": label} for v, label in LIKERT_OPTIONS],
    }

def _session_state(sid: str, sess: AssessmentSession) -> dict[str, t.Any]:
    cur = sess.current()
    return {
        "session_id": sid,
        "step": sess.step,
        "index": sess.idx,
        "total": sess.total,
        "progress_pct": sess.progress_pct(),
        "can_advance": sess.can_advance(),
        "item": _serialize_question(cur, sess.idx if cur else None),
        "answer": sess.answers.get(cur.id) if cur else None,
    }

def _get_session(sid: str) -> AssessmentSession:
    sess = SESS.get(sid)
    if not sess: raise HTTPException(404, "session not found")
    return sess

# ---- Health ----
@app.get("/health")
def health():
    cfg = load_config()
    return {
        "questions": len(QUESTIONS),
        "data_dir": str(DATA_ROOT),
        "save_results_enabled": bool(cfg.get("SAVE_RESULTS_ENABLED")),
        "invite_configured": bool(cfg.get("INVITE_CONFIGURED")),
    }

# ---- Question bank ----
@app.get("/assessment/questions")
def questions():
    return {"questions": [_serialize_question(q, i) for i, q in enumerate(QUESTIONS)]}

@app.get("/assessment/scale")
def scale():
    return {"options": [{"value": v, "label": label} for v, label in LIKERT_OPTIONS]}

@app.post("/assessment/score")
def score(req: ScoreReq):
    return result_to_dict(score_answers(req.answers))

# ---- Quiz sessions ----
@app.post("/session/start")
def start(req: StartReq):
    sid = str(uuid.uuid4())
    sess = AssessmentSession(user_id=req.user_id)
    sess.start()
    SESS[sid] = sess
    return _session_state(sid, sess)

@app.get("/session/{sid}")
def session_state(sid: str):
    return _session_state(sid, _get_session(sid))

@app.post("/session/{sid}/answer")
def answer(sid: str, req: AnswerReq):
    sess = _get_session(sid)
    try:
        sess.answer(req.value, item_id=req.item_id)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return _session_state(sid, sess)

@app.post("/session/{sid}/next")
def next_question(sid: str):
    sess = _get_session(sid)
    if not sess.advance():
        raise HTTPException(409, "answer the current question before continuing")
    state = _session_state(sid, sess)
    if sess.step == "RESULTS":
        state["result"] = result_to_dict(sess.result())
    return state

@app.post("/session/{sid}/back")
def back(sid: str):
    sess = _get_session(sid)
    sess.back()
    return _session_state(sid, sess)

@app.post("/session/{sid}/restart")
def restart(sid: str):
    sess = _get_session(sid)
    sess.restart()
    sess.start()
    return _session_state(sid, sess)

@app.get("/session/{sid}/result")
def session_result(sid: str):
    return result_to_dict(_get_session(sid).result())

@app.post("/session/{sid}/save")
def save(sid: str):
    sess = _get_session(sid)
    if not sess.user_id:
        raise HTTPException(400, "sign in to save results")
    if sess.step != "RESULTS":
        raise HTTPException(409, "finish the assessment before saving")
    res = sess.result()
    payload = result_to_dict(res)
    if not load_config().get("SAVE_RESULTS_ENABLED"):
        return {"saved": False, "result_id": None,
                "message": "Saving is turned off. Results still shown on screen.", "result": payload}
    record = persistence_record(sess.user_id, res, sess.answers)
    try:
        rid = save_result(record)
    except (OSError, TypeError, ValueError) as exc:
        # the score stands regardless of the store
        log.warning("saving result for session %s failed: %s", sid, exc)
        return {"saved": False, "result_id": None,
                "message": "Couldn't save. Results still shown on screen.", "result": payload}
    return {"saved": True, "result_id": rid, "message": "Saved! Your results are stored.", "result": payload}

# ---- Saved results ----
@app.get("/results/{result_id}")
def get_result(result_id: str):
    row = load_result(result_id)
    if not row:
        raise HTTPException(404, "result not found")
    return row

@app.get("/users/{user_id}/results")
def list_results(user_id: str):
    return {"results": list_results_for_user(user_id)}

# ---- Signup ----
@app.post("/auth/validate-hr-invite")
def validate_hr_invite(req: InviteReq):
    status = check_invite(req.invite_code)
    if status == "missing":
        raise HTTPException(400, "Please enter HR Invite Code.")
    if status == "not_configured":
        raise HTTPException(500, "HR invite configuration missing on server.")
    if status == "wrong":
        raise HTTPException(401, "Wrong HR Invite Code, Retry")
    return {"ok": True}

@app.post("/auth/signup")
def signup(req: SignupReq):
    email = req.email.strip().lower()
    code, message = validate_signup(
        full_name=req.full_name,
        email=email,
        role=req.role,
        department=req.department,
        invite_code=req.invite_code,
    )
    if code != 200:
        raise HTTPException(code, message)
    try:
        user_id = create_profile_if_new(email, {
            "full_name": req.full_name.strip(),
            "role": req.role,
            "department": (req.department or "").strip() if req.role == "EMPLOYEE" else None,
        })
    except (OSError, ValueError) as exc:
        log.warning("storing profile for signup failed: %s", exc)
        raise HTTPException(500, "Couldn't create the account. Please try again.")
    if user_id is None:
        raise HTTPException(400, "An account with this email already exists.")
    log.info("registered %s profile %s", req.role, user_id)
    return {"ok": True, "message": "Account created! Please check your email to verify your account.", "user_id": user_id}

@app.get("/profiles/{user_id}")
def get_profile(user_id: str):
    row = load_profile(user_id)
    if not row:
        raise HTTPException(404, "profile not found")
    return row
