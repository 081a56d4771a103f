"""Authentication schema objects."""

from pydantic import BaseModel, field_validator


class LoginInput(BaseModel):
    """Login request body."""

    username: str = ""
    password: str = ""

    @field_validator("username", "password", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class TokenResponse(BaseModel):
    """Issued bearer token."""

    token: str


class DashboardResponse(BaseModel):
    """Admin dashboard greeting."""

    message: str
