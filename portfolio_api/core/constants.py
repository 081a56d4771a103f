"""Application-wide constants and shared values."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

MIN_JWT_SECRET_BYTES = 32
JWT_ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=1)

DASHBOARD_WELCOME_MESSAGE = "Welcome to your portfolio dashboard!"
CONTACT_REQUIRED_MESSAGE = "Name and message are required."
CONTACT_RECEIVED_MESSAGE = "Message received."
ADMIN_NOT_CONFIGURED_MESSAGE = "Admin credentials not configured."


def utcnow() -> datetime:
    """Return timezone-aware current UTC datetime."""

    return datetime.now(UTC)
