"""
Comment use cases.

Comments are embedded in their profile's ``comments`` list. Authorship is a
snapshot of the author's username, so edit/delete rights are checked by
comparing the acting user's current username with the stored one.
"""

from __future__ import annotations

import copy
import logging

from api.core.ids import new_id
from api.repositories.document_repository import DocumentRepository
from api.repositories.json_storage import DocumentStore
from api.services.errors import ForbiddenError, InvalidOwnerError, NotFoundError

logger = logging.getLogger(__name__)


class CommentService:
    """Lists, adds, edits and removes profile comments."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def list_comments(self, profile_id: str) -> list[dict]:
        with self.store.snapshot() as db:
            profile = DocumentRepository(db).get_profile(profile_id)
            if not profile:
                raise NotFoundError("Profile not found")
            return copy.deepcopy(profile.get("comments") or [])

    def add_comment(self, profile_id: str, owner_id: str | None, text) -> dict:
        with self.store.transaction() as db:
            repo = DocumentRepository(db)
            user = repo.get_user(owner_id)
            if not user:
                raise InvalidOwnerError("Invalid ownerId")
            profile = repo.get_profile(profile_id)
            if not profile:
                raise NotFoundError("Profile not found")
            comment = {"id": new_id(), "username": user["username"]}
            if text is not None:
                comment["text"] = text
            profile["comments"] = (profile.get("comments") or []) + [comment]
            logger.info("Comment %s added to profile %s", comment["id"], profile_id)
            return dict(comment)

    def _locate_owned(self, repo: DocumentRepository, comment_id: str, owner_id: str | None):
        profile, comment = repo.find_comment(comment_id)
        if not comment:
            raise NotFoundError("Comment not found")
        user = repo.get_user(owner_id)
        if not user or user.get("username") != comment.get("username"):
            raise ForbiddenError("Not your comment")
        return profile, comment

    def update_comment(self, comment_id: str, owner_id: str | None, text) -> dict:
        with self.store.transaction() as db:
            _, comment = self._locate_owned(DocumentRepository(db), comment_id, owner_id)
            # mesma regra de apply_truthy_fields: vazio ou [] / {} mantem o texto
            if text:
                comment["text"] = text
        return {"success": True}

    def delete_comment(self, comment_id: str, owner_id: str | None) -> dict:
        with self.store.transaction() as db:
            profile, comment = self._locate_owned(DocumentRepository(db), comment_id, owner_id)
            profile["comments"] = [c for c in profile["comments"] if c is not comment]
            logger.info("Comment %s removed from profile %s", comment_id, profile.get("id"))
        return {"success": True}
