from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from api.routers.deps import acting_user_id, error_response, get_comment_service, json_body
from api.services.auth_service import SessionInvalidError
from api.services.errors import ForbiddenError, NotFoundError

router = APIRouter(prefix="/comments", tags=["comments"])


@router.put("/{comment_id}")
def update_comment(comment_id: str, request: Request, body: dict = Depends(json_body)):
    svc = get_comment_service(request)
    try:
        owner_id = acting_user_id(request, body)
        return svc.update_comment(comment_id, owner_id, body.get("text"))
    except SessionInvalidError as exc:
        return error_response(401, exc.message)
    except NotFoundError as exc:
        return error_response(404, exc.message)
    except ForbiddenError as exc:
        return error_response(403, exc.message)


@router.delete("/{comment_id}")
def delete_comment(comment_id: str, request: Request, body: dict = Depends(json_body)):
    svc = get_comment_service(request)
    try:
        owner_id = acting_user_id(request, body)
        return svc.delete_comment(comment_id, owner_id)
    except SessionInvalidError as exc:
        return error_response(401, exc.message)
    except NotFoundError as exc:
        return error_response(404, exc.message)
    except ForbiddenError as exc:
        return error_response(403, exc.message)
