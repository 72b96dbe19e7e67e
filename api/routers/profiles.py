from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.routers.deps import (
    acting_user_id,
    error_response,
    get_comment_service,
    get_profile_service,
    json_body,
)
from api.services.auth_service import SessionInvalidError
from api.services.errors import ForbiddenError, InvalidOwnerError, NotFoundError

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("")
def list_profiles(request: Request):
    return get_profile_service(request).list_profiles()


@router.get("/{profile_id}")
def get_profile(profile_id: str, request: Request):
    try:
        return get_profile_service(request).get_profile(profile_id)
    except NotFoundError as exc:
        return error_response(404, exc.message, key="message")


@router.post("")
def create_profile(request: Request, body: dict = Depends(json_body)):
    svc = get_profile_service(request)
    try:
        owner_id = acting_user_id(request, body)
        profile = svc.create_profile(body.get("name"), body.get("image"), body.get("description"), owner_id)
    except (SessionInvalidError, InvalidOwnerError) as exc:
        return error_response(401, exc.message)
    return JSONResponse(profile, status_code=201)


@router.put("/{profile_id}")
def update_profile(profile_id: str, request: Request, body: dict = Depends(json_body)):
    svc = get_profile_service(request)
    try:
        owner_id = acting_user_id(request, body)
        return svc.update_profile(profile_id, owner_id, body)
    except SessionInvalidError as exc:
        return error_response(401, exc.message)
    except NotFoundError as exc:
        return error_response(404, exc.message)
    except ForbiddenError as exc:
        return error_response(403, exc.message)


@router.get("/{profile_id}/comments")
def list_comments(profile_id: str, request: Request):
    try:
        return get_comment_service(request).list_comments(profile_id)
    except NotFoundError as exc:
        return error_response(404, exc.message)


@router.post("/{profile_id}/comments")
def add_comment(profile_id: str, request: Request, body: dict = Depends(json_body)):
    svc = get_comment_service(request)
    try:
        owner_id = acting_user_id(request, body)
        comment = svc.add_comment(profile_id, owner_id, body.get("text"))
    except (SessionInvalidError, InvalidOwnerError) as exc:
        return error_response(401, exc.message)
    except NotFoundError as exc:
        return error_response(404, exc.message)
    return JSONResponse(comment, status_code=201)
