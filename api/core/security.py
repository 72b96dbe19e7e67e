"""Security helpers (hashing and verification)."""

from __future__ import annotations

import bcrypt
from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> str:
    """Create a modern Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def is_legacy_hash(stored_hash: str | None) -> bool:
    """True for hashes written by the old Node backend (bcrypt)."""
    return (stored_hash or "").startswith(_BCRYPT_PREFIXES)


def _verify_bcrypt(password: str, stored: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), stored.encode("utf-8"))
    except ValueError:
        return False


def verify_password(password: str | None, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if not isinstance(password, str) or not password:
        return False
    if stored.startswith(_PREFIX):
        try:
            return _ph.verify(stored[len(_PREFIX) :], password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    if is_legacy_hash(stored):
        return _verify_bcrypt(password, stored)
    return False
