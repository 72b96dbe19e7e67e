"""Opaque identifier generation for users, profiles, comments and sessions."""

from __future__ import annotations

import secrets


def new_id() -> str:
    """Short url-safe id (~21 chars), no semantic structure."""
    return secrets.token_urlsafe(16)


def new_token() -> str:
    return secrets.token_urlsafe(32)
