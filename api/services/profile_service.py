"""Profile use cases (listing, lookup, creation, owner-only edits)."""

from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from api.core.ids import new_id
from api.domain.profiles import apply_truthy_fields, public_profile
from api.repositories.document_repository import DocumentRepository
from api.repositories.json_storage import DocumentStore
from api.services.errors import ForbiddenError, InvalidOwnerError, NotFoundError

logger = logging.getLogger(__name__)


class ProfileService:
    """Provides public profile views and owner-restricted mutations."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def list_profiles(self) -> list[dict]:
        with self.store.snapshot() as db:
            return [public_profile(p) for p in DocumentRepository(db).list_profiles()]

    def get_profile(self, profile_id: str) -> dict:
        with self.store.snapshot() as db:
            profile = DocumentRepository(db).get_profile(profile_id)
            if not profile:
                raise NotFoundError("Profile not found")
            return public_profile(profile)

    def create_profile(self, name: Any, image: Any, description: Any, owner_id: str | None) -> dict:
        with self.store.transaction() as db:
            repo = DocumentRepository(db)
            if not repo.get_user(owner_id):
                raise InvalidOwnerError("Invalid ownerId")
            fields = {"name": name, "image": image, "description": description}
            # campos ausentes no corpo nao viram null no documento
            profile = {"id": new_id(), **{k: v for k, v in fields.items() if v is not None}}
            profile.update({"ownerId": owner_id, "comments": []})
            repo.add_profile(profile)
            logger.info("Profile %s created by %s", profile["id"], owner_id)
            return copy.deepcopy(profile)

    def update_profile(self, profile_id: str, owner_id: str | None, fields: Mapping[str, Any]) -> dict:
        with self.store.transaction() as db:
            profile = DocumentRepository(db).get_profile(profile_id)
            if not profile:
                raise NotFoundError("Profile not found")
            if profile.get("ownerId") != owner_id:
                raise ForbiddenError("Not your profile")
            changed = apply_truthy_fields(profile, fields)
            logger.debug("Profile %s updated fields=%s", profile_id, changed)
            return copy.deepcopy(profile)
