from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.routers.deps import error_response, get_auth_service, json_body
from api.services.auth_service import (
    InvalidCredentialsError,
    RegistrationError,
    UsernameTakenError,
)
from api.services.session_service import bearer_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
def register(request: Request, body: dict = Depends(json_body)):
    svc = get_auth_service(request)
    try:
        result = svc.register(body.get("username"), body.get("password"))
    except UsernameTakenError as exc:
        return error_response(409, exc.message)
    except RegistrationError as exc:
        return error_response(400, exc.message)
    return JSONResponse(asdict(result), status_code=201)


@router.post("/login")
def login(request: Request, body: dict = Depends(json_body)):
    svc = get_auth_service(request)
    try:
        result = svc.login(body.get("username"), body.get("password"))
    except InvalidCredentialsError as exc:
        return error_response(401, exc.message)
    return asdict(result)


@router.post("/logout")
def logout(request: Request):
    get_auth_service(request).logout(bearer_token(request))
    return {"success": True}
