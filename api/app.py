from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from api.core.config import Settings, get_settings
from api.core.logging_config import setup_logging
from api.repositories.json_storage import DocumentStore
from api.routers import auth as auth_router
from api.routers import comments as comments_router
from api.routers import profiles as profiles_router
from api.services.auth_service import AuthService
from api.services.comment_service import CommentService
from api.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


def apply_security_headers(response: Response, *, enforce_hsts: bool) -> Response:
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    if enforce_hsts:
        response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers for JSON responses."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        return apply_security_headers(response, enforce_hsts=self._enforce_hsts)


def create_app(settings: Settings | None = None, store: DocumentStore | None = None) -> FastAPI:
    """Build the FastAPI app; tests pass their own settings/store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    store = store or DocumentStore(settings.data_file)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        store.initialize()
        logger.info("Serving profiles from %s on port %s", store.path, settings.port)
        yield

    application = FastAPI(title="Profile Board API", lifespan=lifespan)
    application.state.settings = settings
    application.state.store = store
    application.state.auth_service = AuthService(store=store, settings=settings)
    application.state.profile_service = ProfileService(store)
    application.state.comment_service = CommentService(store)

    @application.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        detail = "Internal server error" if settings.is_production else str(exc)
        # ServerErrorMiddleware fica fora dos middlewares do app: headers vao aqui
        response = JSONResponse({"error": detail}, status_code=500, headers={"Access-Control-Allow-Origin": "*"})
        return apply_security_headers(response, enforce_hsts=settings.is_production)

    # API publica: qualquer origem pode consumir
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    application.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.is_production)

    @application.get("/health")
    def health():
        return {"ok": True}

    application.include_router(auth_router.router)
    application.include_router(profiles_router.router)
    application.include_router(comments_router.router)
    return application


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
