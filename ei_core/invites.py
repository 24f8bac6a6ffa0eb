"""Signup checks: allowed email domains and the HR invite code.

The invite code itself is never stored. Operators configure a salt
(``INVITE_CODE_SALT``) and the expected digest (``HR_INVITE_HASH``), which
must be generated as ``sha256(salt + ":" + code)``.
"""
from __future__ import annotations

import hashlib
import hmac
import os
from typing import Literal, Optional, Tuple

InviteStatus = Literal["ok", "missing", "not_configured", "wrong"]


def get_email_domain(email: str) -> str:
    e = (email or "").strip().lower()
    at = e.rfind("@")
    if at == -1:
        return ""
    return e[at + 1:]


def allowed_domains() -> list[str]:
    raw = os.getenv("ALLOWED_EMAIL_DOMAINS", "")
    return [d.strip().lower() for d in raw.split(",") if d.strip()]


def is_allowed_domain(email: str) -> bool:
    domain = get_email_domain(email)
    if not domain:
        return False
    domains = allowed_domains()
    # no allow-list configured means any domain
    if not domains:
        return True
    return domain in domains


def hash_invite(code: str) -> str:
    salt = os.getenv("INVITE_CODE_SALT")
    if not salt:
        raise RuntimeError("INVITE_CODE_SALT is missing.")
    payload = f"{salt}:{str(code or '').strip()}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def check_invite(code: Optional[str]) -> InviteStatus:
    code = (code or "").strip()
    if not code:
        return "missing"
    expected = os.getenv("HR_INVITE_HASH", "").strip()
    if not expected or not os.getenv("INVITE_CODE_SALT"):
        return "not_configured"
    if not hmac.compare_digest(hash_invite(code), expected):
        return "wrong"
    return "ok"


def validate_signup(
    *,
    full_name: str,
    email: str,
    role: str,
    department: Optional[str] = None,
    invite_code: Optional[str] = None,
) -> Tuple[int, str]:
    """
    Returns (status_code, message). 200 means the signup may proceed;
    rules are checked in order and the first failure wins.
    """
    if not (full_name or "").strip() or not (email or "").strip() or not role:
        return 400, "Kindly complete all fields before continuing."

    if role not in ("EMPLOYEE", "HR"):
        return 400, "Please choose a valid role."

    if not is_allowed_domain(email):
        return 400, "Please use an allowed email domain."

    if role == "HR":
        status = check_invite(invite_code)
        if status == "missing":
            return 400, "HR Invite Code is required."
        if status == "not_configured":
            return 500, "HR invite configuration missing on server."
        if status == "wrong":
            return 400, "Wrong HR Invite Code"

    if role == "EMPLOYEE" and not (department or "").strip():
        return 400, "Department is required for Employee."

    return 200, "ok"
