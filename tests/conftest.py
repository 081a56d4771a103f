from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-at-least-32-bytes")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi import FastAPI
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from portfolio_api.core.config import Settings
from portfolio_api.core.tokens import issue_token
from portfolio_api.db.session import get_session
from portfolio_api.main import create_app

from .support import ADMIN_USERNAME, ApiResponse, asgi_request, make_settings


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(engine, settings) -> FastAPI:
    app = create_app(settings, engine=engine)

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    return app


@pytest.fixture
def api(app) -> Callable[..., ApiResponse]:
    def call(method: str, path: str, **kwargs: Any) -> ApiResponse:
        return asgi_request(app, method, path, **kwargs)

    return call


@pytest.fixture
def auth_headers(settings) -> dict[str, str]:
    token = issue_token(ADMIN_USERNAME, settings.jwt_secret)
    return {"Authorization": f"Bearer {token}"}
