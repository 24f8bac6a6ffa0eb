"""JSON-file record store for saved results and user profiles.

Rows are plain dicts written under ``DATA_DIR``. Each write goes through a
temp file and a rename so a crash never leaves half a record behind.
"""

from __future__ import annotations

import json
import logging
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


DATA_ROOT = Path(os.getenv("DATA_DIR", "data")).resolve()
RESULTS_DIR = DATA_ROOT / "results"
RESULTS_INDEX_PATH = DATA_ROOT / "results_index.json"
PROFILES_PATH = DATA_ROOT / "profiles.json"

_LOCK = threading.Lock()

log = logging.getLogger(__name__)


def _ensure_dirs() -> None:
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    DATA_ROOT.mkdir(parents=True, exist_ok=True)


def _read_json(path: Path, default: Any) -> Any:
    if not path.exists():
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        log.warning("unreadable store file %s, using default", path)
        return default


def _read_json_strict(path: Path, default: Any) -> Any:
    """Like ``_read_json`` but raises ``ValueError`` for a damaged file.

    Used before rewriting a shared file, so its entries are never replaced
    by ``default``.
    """
    if not path.exists():
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ValueError(f"store file {path} is not valid JSON") from exc


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    tmp.replace(path)


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def save_result(record: Dict[str, Any], result_id: Optional[str] = None) -> str:
    """Persist one saved assessment row and index it by user. Returns its id.

    The row file and the index entry land together or not at all: an
    unreadable index raises before anything is written, and a failed index
    write removes the row file again.
    """

    rid = result_id or str(uuid.uuid4())
    row = dict(record)
    row["id"] = rid
    row.setdefault("created_at", utcnow_iso())
    row_path = RESULTS_DIR / f"{rid}.json"

    with _LOCK:
        _ensure_dirs()
        index: Dict[str, Dict[str, Any]] = _read_json_strict(RESULTS_INDEX_PATH, {})
        index[rid] = {
            "userId": row.get("user_id"),
            "createdAt": row["created_at"],
            "overall": row.get("overall_score"),
        }
        _write_json(row_path, row)
        try:
            _write_json(RESULTS_INDEX_PATH, index)
        except Exception:
            row_path.unlink(missing_ok=True)
            raise

    log.info("saved result %s for user %s", rid, row.get("user_id"))
    return rid


def load_result(result_id: str) -> Optional[Dict[str, Any]]:
    path = RESULTS_DIR / f"{result_id}.json"
    if not path.exists():
        return None
    return _read_json(path, None)


def list_results_for_user(user_id: str) -> List[Dict[str, Any]]:
    index: Dict[str, Dict[str, Any]] = _read_json(RESULTS_INDEX_PATH, {})
    out: List[Dict[str, Any]] = []
    for rid, meta in index.items():
        if meta.get("userId") == user_id:
            item = {"id": rid}
            item.update({k: v for k, v in meta.items() if k != "id"})
            out.append(item)
    out.sort(key=lambda r: r.get("createdAt", ""), reverse=True)
    return out


def _load_profiles() -> Dict[str, Dict[str, Any]]:
    return _read_json(PROFILES_PATH, {})


def create_profile_if_new(email: str, profile: Dict[str, Any]) -> Optional[str]:
    """Store a new profile unless one already uses ``email``.

    The lookup and the write share one lock hold, so two signups racing on
    the same address cannot both get through. Returns the new user id, or
    None when the email is taken.
    """
    target = (email or "").strip().lower()
    with _LOCK:
        profiles: Dict[str, Dict[str, Any]] = _read_json_strict(PROFILES_PATH, {})
        for row in profiles.values():
            if str(row.get("email", "")).lower() == target:
                return None
        user_id = str(uuid.uuid4())
        row = dict(profile)
        row["id"] = user_id
        row["email"] = target
        row.setdefault("joined_at", utcnow_iso())
        profiles[user_id] = row
        _write_json(PROFILES_PATH, profiles)
    return user_id


def load_profile(user_id: str) -> Optional[Dict[str, Any]]:
    return _load_profiles().get(user_id)
