"""Application settings and environment loading."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Request
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio_api.core.constants import MIN_JWT_SECRET_BYTES
from portfolio_api.core.security import AdminIdentity


class Settings(BaseSettings):
    """Centralized, immutable application settings."""

    app_name: str = "Portfolio Admin API"
    app_debug: bool = False
    log_level: str = "INFO"

    jwt_secret: str
    database_url: str

    admin_username: str = ""
    admin_password_hash: str = ""

    cors_origins: list[str] = [
        "http://localhost:52017",
        "https://localhost:52017",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("jwt_secret")
    @classmethod
    def _require_long_secret(cls, value: str) -> str:
        if len(value.encode("utf-8")) < MIN_JWT_SECRET_BYTES:
            raise ValueError(
                f"JWT_SECRET is missing or too short. Must be at least {MIN_JWT_SECRET_BYTES} bytes."
            )
        return value

    @field_validator("database_url")
    @classmethod
    def _normalize_database_url(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("DATABASE_URL environment variable is not set.")
        if normalized.startswith("postgres://"):
            return "postgresql://" + normalized.removeprefix("postgres://")
        return normalized

    @property
    def admin_identity(self) -> AdminIdentity:
        return AdminIdentity(
            username=self.admin_username,
            password_hash=self.admin_password_hash,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""

    return request.app.state.settings
