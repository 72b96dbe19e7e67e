"""Domain helpers for profile projections and partial updates."""
from __future__ import annotations

import copy
from typing import Any, Mapping

EDITABLE_FIELDS = ("name", "image", "description")
PRIVATE_FIELDS = ("ownerId", "comments")


def public_profile(profile: Mapping[str, Any]) -> dict:
    """Profile without ownerId/comments, with the number of comments instead."""
    public = {k: copy.deepcopy(v) for k, v in profile.items() if k not in PRIVATE_FIELDS}
    public["commentCount"] = len(profile.get("comments") or [])
    return public


def apply_truthy_fields(target: dict, fields: Mapping[str, Any], names=EDITABLE_FIELDS) -> list[str]:
    """
    Copy each named field that is truthy in ``fields`` onto ``target``.

    Empty strings and None mean "no change"; an existing value can never be
    cleared through this path. Returns the names that changed.
    """
    changed = []
    for name in names:
        value = fields.get(name)
        # [] e {} tambem contam como "sem mudanca" aqui, diferente do || do JS
        if value:
            target[name] = value
            changed.append(name)
    return changed
