"""Session helpers (issue tokens, header parsing, validation)."""
from __future__ import annotations

import time

from fastapi import Request

from api.core.ids import new_token
from api.repositories.document_repository import DocumentRepository

MIN_TTL_SECONDS = 60


def _now() -> int:
    return int(time.time())


def issue_session(repo: DocumentRepository, user_id: str, ttl_seconds: int) -> str:
    """Create a new session token for ``user_id`` inside the given document."""
    token = new_token()
    ttl = max(MIN_TTL_SECONDS, ttl_seconds)
    repo.purge_expired_sessions(_now())
    repo.add_session({"token": token, "userId": user_id, "expiresAt": _now() + ttl})
    return token


def session_user_id(repo: DocumentRepository, token: str | None) -> str | None:
    """Return the user id bound to a live session token, if any."""
    session = repo.get_session(token)
    if not session:
        return None
    if int(session.get("expiresAt") or 0) <= _now():
        return None
    return session.get("userId")


def delete_session(repo: DocumentRepository, token: str | None) -> bool:
    if not token:
        return False
    return repo.delete_session(token)


def bearer_token(request: Request) -> str | None:
    """Extract the token from ``Authorization: Bearer <token>``."""
    header = request.headers.get("authorization") or ""
    scheme, _, value = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return value.strip() or None
