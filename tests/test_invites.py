from __future__ import annotations

import hashlib

import pytest

from ei_core import invites


SALT = "pepper"
CODE = "OPEN-SESAME"


@pytest.fixture
def invite_env(monkeypatch):
    monkeypatch.setenv("INVITE_CODE_SALT", SALT)
    monkeypatch.setenv("HR_INVITE_HASH", hashlib.sha256(f"{SALT}:{CODE}".encode()).hexdigest())
    monkeypatch.delenv("ALLOWED_EMAIL_DOMAINS", raising=False)


def test_email_domain_parsing():
    assert invites.get_email_domain("  Ana@Example.COM ") == "example.com"
    assert invites.get_email_domain("a@b@corp.io") == "corp.io"
    assert invites.get_email_domain("nobody") == ""


def test_domain_allow_list(monkeypatch):
    monkeypatch.delenv("ALLOWED_EMAIL_DOMAINS", raising=False)
    assert invites.is_allowed_domain("x@anything.org")
    assert not invites.is_allowed_domain("no-at-sign")

    monkeypatch.setenv("ALLOWED_EMAIL_DOMAINS", " Corp.io , team.corp.io,")
    assert invites.is_allowed_domain("x@corp.io")
    assert invites.is_allowed_domain("x@TEAM.corp.io")
    assert not invites.is_allowed_domain("x@gmail.com")


def test_hash_invite_matches_salted_sha256(invite_env):
    expected = hashlib.sha256(f"{SALT}:{CODE}".encode()).hexdigest()
    assert invites.hash_invite(CODE) == expected
    assert invites.hash_invite(f"  {CODE} ") == expected


def test_hash_invite_requires_salt(monkeypatch):
    monkeypatch.delenv("INVITE_CODE_SALT", raising=False)
    with pytest.raises(RuntimeError):
        invites.hash_invite(CODE)


def test_check_invite_statuses(invite_env, monkeypatch):
    assert invites.check_invite(CODE) == "ok"
    assert invites.check_invite("nope") == "wrong"
    assert invites.check_invite("   ") == "missing"
    assert invites.check_invite(None) == "missing"
    monkeypatch.delenv("HR_INVITE_HASH")
    assert invites.check_invite(CODE) == "not_configured"


def test_signup_rules_in_order(invite_env, monkeypatch):
    ok = dict(full_name="Ana", email="ana@corp.io", role="EMPLOYEE", department="Ops")
    assert invites.validate_signup(**ok) == (200, "ok")

    assert invites.validate_signup(**{**ok, "full_name": " "})[0] == 400
    assert invites.validate_signup(**{**ok, "role": "ADMIN"}) == (400, "Please choose a valid role.")
    assert invites.validate_signup(**{**ok, "department": ""}) == (400, "Department is required for Employee.")

    hr = dict(full_name="Bo", email="bo@corp.io", role="HR")
    assert invites.validate_signup(**hr) == (400, "HR Invite Code is required.")
    assert invites.validate_signup(**hr, invite_code="bad") == (400, "Wrong HR Invite Code")
    assert invites.validate_signup(**hr, invite_code=CODE) == (200, "ok")

    monkeypatch.setenv("ALLOWED_EMAIL_DOMAINS", "corp.io")
    assert invites.validate_signup(**{**ok, "email": "ana@gmail.com"}) == (400, "Please use an allowed email domain.")

    monkeypatch.delenv("HR_INVITE_HASH")
    assert invites.validate_signup(**hr, invite_code=CODE) == (500, "HR invite configuration missing on server.")
