from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from portfolio_api.core.access import requires_auth
from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.tokens import extract_bearer_token
from portfolio_api.db.init_db import run_migrations
from portfolio_api.db.session import build_engine
from portfolio_api.routers.auth import router as auth_router
from portfolio_api.routers.contact import router as contact_router
from portfolio_api.routers.projects import router as projects_router
from portfolio_api.services.auth_service import authenticate_bearer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    run_migrations(app.state.engine)
    yield
    app.state.engine.dispose()


def _route_path(request: Request) -> str:
    # Routing matches on the path below the mount prefix, so the guard must too.
    path = request.scope["path"]
    root_path = request.scope.get("root_path", "")
    if root_path and path.startswith(root_path):
        return path[len(root_path):] or "/"
    return path


def _unauthorized() -> JSONResponse:
    return JSONResponse(
        {"detail": "Not authenticated"},
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title=settings.app_name, debug=settings.app_debug, lifespan=_lifespan)
    app.state.settings = settings
    app.state.engine = engine or build_engine(settings.database_url, echo=settings.app_debug)

    @app.middleware("http")
    async def admin_guard(request: Request, call_next):
        if requires_auth(request.method, _route_path(request)):
            token = extract_bearer_token(request.headers.get("authorization"))
            claims = authenticate_bearer(token, settings.jwt_secret)
            if claims is None:
                return _unauthorized()
            request.state.admin_username = claims.sub
        return await call_next(request)

    # Added last so it wraps the guard and decorates 401 responses too.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(projects_router)
    app.include_router(contact_router)
    return app


app = create_app()
