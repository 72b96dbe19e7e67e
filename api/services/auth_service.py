"""
Authentication and identity related use cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from api.core.config import Settings, get_settings
from api.core.ids import new_id
from api.core.security import hash_password, is_legacy_hash, verify_password
from api.repositories.document_repository import DocumentRepository
from api.repositories.json_storage import DocumentStore
from api.services.session_service import delete_session, issue_session, session_user_id

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for authentication-related exceptions."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RegistrationError(AuthError):
    pass


class UsernameTakenError(AuthError):
    pass


class InvalidCredentialsError(AuthError):
    pass


class SessionInvalidError(AuthError):
    pass


@dataclass
class RegisterResult:
    id: str
    username: str


@dataclass
class LoginResult:
    id: str
    username: str
    token: str


@dataclass
class AuthService:
    """Handles registration, login and session resolution."""

    store: DocumentStore
    settings: Optional[Settings] = None

    def __post_init__(self):
        if self.settings is None:
            self.settings = get_settings()

    # -------------------------------------- registro --------------------------------------
    def register(self, username: str | None, password: str | None) -> RegisterResult:
        if not (isinstance(username, str) and username and isinstance(password, str) and password):
            raise RegistrationError("Username and password are required")
        password_hash = hash_password(password)
        with self.store.transaction() as db:
            repo = DocumentRepository(db)
            if repo.get_user_by_username(username):
                raise UsernameTakenError("Username taken")
            user = repo.add_user({"id": new_id(), "username": username, "passwordHash": password_hash})
        logger.info("Registered user %s", user["id"])
        return RegisterResult(id=user["id"], username=user["username"])

    # -------------------------------------- login --------------------------------------
    def login(self, username: str | None, password: str | None) -> LoginResult:
        with self.store.transaction() as db:
            repo = DocumentRepository(db)
            user = repo.get_user_by_username(username)
            # mesma mensagem para usuario inexistente e senha errada
            if not user or not verify_password(password, repo.password_hash_of(user)):
                logger.warning("Failed login attempt")
                raise InvalidCredentialsError("Invalid credentials")
            if is_legacy_hash(repo.password_hash_of(user)):
                repo.update_password_hash(user, hash_password(password))
            token = issue_session(repo, user["id"], self.settings.session_ttl_seconds)
        return LoginResult(id=user["id"], username=user["username"], token=token)

    def logout(self, session_token: Optional[str]) -> None:
        if not session_token:
            return
        with self.store.transaction() as db:
            delete_session(DocumentRepository(db), session_token)

    # -------------------------------------- identidade --------------------------------------
    def resolve_token(self, session_token: Optional[str]) -> Optional[str]:
        with self.store.snapshot() as db:
            return session_user_id(DocumentRepository(db), session_token)

    def resolve_actor(self, session_token: Optional[str], raw_owner_id: Optional[str]) -> Optional[str]:
        """
        Decide which user id a request acts as.

        A bearer token always wins and must be valid. Without one, the raw
        ``ownerId`` from the body is trusted unless ALLOW_RAW_OWNER_ID is off.
        """
        if session_token:
            user_id = self.resolve_token(session_token)
            if not user_id:
                raise SessionInvalidError("Invalid or expired session")
            return user_id
        if self.settings.allow_raw_owner_id:
            return raw_owner_id
        raise SessionInvalidError("Authentication required")
