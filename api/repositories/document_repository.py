"""Lookup and mutation helpers over the in-memory JSON document."""
from __future__ import annotations

from typing import Optional


class DocumentRepository:
    """
    CRUD helpers wrapping one loaded document.

    Instances are cheap and meant to be created inside
    ``DocumentStore.transaction()``/``snapshot()``; they never persist anything
    themselves.
    """

    def __init__(self, db: dict) -> None:
        self.db = db

    # -------------------------- users --------------------------
    def get_user(self, user_id: str | None) -> Optional[dict]:
        if not user_id:
            return None
        return next((u for u in self.db["users"] if u.get("id") == user_id), None)

    def get_user_by_username(self, username: str | None) -> Optional[dict]:
        if username is None:
            return None
        return next((u for u in self.db["users"] if u.get("username") == username), None)

    def add_user(self, user: dict) -> dict:
        self.db["users"].append(user)
        return user

    @staticmethod
    def password_hash_of(user: dict) -> str:
        # registros antigos guardavam o hash em "password"
        return user.get("passwordHash") or user.get("password") or ""

    @staticmethod
    def update_password_hash(user: dict, password_hash: str) -> None:
        user["passwordHash"] = password_hash
        user.pop("password", None)

    # -------------------------- profiles --------------------------
    def list_profiles(self) -> list[dict]:
        return list(self.db["profiles"])

    def get_profile(self, profile_id: str | None) -> Optional[dict]:
        if not profile_id:
            return None
        return next((p for p in self.db["profiles"] if p.get("id") == profile_id), None)

    def add_profile(self, profile: dict) -> dict:
        self.db["profiles"].append(profile)
        return profile

    # -------------------------- comments --------------------------
    def find_comment(self, comment_id: str | None) -> tuple[Optional[dict], Optional[dict]]:
        """Return (profile, comment) for the first match in insertion order."""
        if not comment_id:
            return None, None
        for profile in self.db["profiles"]:
            for comment in profile.get("comments") or []:
                if comment.get("id") == comment_id:
                    return profile, comment
        return None, None

    # -------------------------- sessions --------------------------
    def get_session(self, token: str | None) -> Optional[dict]:
        if not token:
            return None
        return next((s for s in self.db["sessions"] if s.get("token") == token), None)

    def add_session(self, session: dict) -> dict:
        self.db["sessions"].append(session)
        return session

    def delete_session(self, token: str) -> bool:
        before = len(self.db["sessions"])
        self.db["sessions"] = [s for s in self.db["sessions"] if s.get("token") != token]
        return len(self.db["sessions"]) != before

    def purge_expired_sessions(self, now: int) -> int:
        before = len(self.db["sessions"])
        self.db["sessions"] = [s for s in self.db["sessions"] if int(s.get("expiresAt") or 0) > now]
        return before - len(self.db["sessions"])
