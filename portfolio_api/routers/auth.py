"""Admin login and dashboard routes."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.core.config import Settings, get_app_settings
from portfolio_api.core.constants import ADMIN_NOT_CONFIGURED_MESSAGE, DASHBOARD_WELCOME_MESSAGE
from portfolio_api.core.security import AdminNotConfiguredError
from portfolio_api.schemas.auth import DashboardResponse, LoginInput, TokenResponse
from portfolio_api.services.auth_service import login_admin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
def login(
    login_input: LoginInput,
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    try:
        token = login_admin(
            settings.admin_identity,
            settings.jwt_secret,
            username=login_input.username,
            password=login_input.password,
        )
    except AdminNotConfiguredError:
        logger.error("Login attempted but ADMIN_USERNAME or ADMIN_PASSWORD_HASH is not set")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ADMIN_NOT_CONFIGURED_MESSAGE,
        ) from None

    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(token=token)


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard():
    return DashboardResponse(message=DASHBOARD_WELCOME_MESSAGE)
