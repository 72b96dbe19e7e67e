"""Request helpers shared by the JSON routers."""
from __future__ import annotations

import json

from fastapi import Request
from fastapi.responses import JSONResponse

from api.services.auth_service import AuthService
from api.services.comment_service import CommentService
from api.services.profile_service import ProfileService
from api.services.session_service import bearer_token


async def json_body(request: Request) -> dict:
    """Parse the body leniently: anything that is not a JSON object becomes {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _state_service(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} nao configurado")
    return svc


def get_auth_service(request: Request) -> AuthService:
    return _state_service(request, "auth_service")


def get_profile_service(request: Request) -> ProfileService:
    return _state_service(request, "profile_service")


def get_comment_service(request: Request) -> CommentService:
    return _state_service(request, "comment_service")


def acting_user_id(request: Request, body: dict) -> str | None:
    """User id the request acts as (session token first, then body ownerId)."""
    return get_auth_service(request).resolve_actor(bearer_token(request), body.get("ownerId"))


def error_response(status_code: int, message: str, key: str = "error") -> JSONResponse:
    return JSONResponse({key: message}, status_code=status_code)
