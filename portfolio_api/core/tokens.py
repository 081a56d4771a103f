"""Signed bearer token issuance and validation."""

from __future__ import annotations

from datetime import datetime

import jwt
from pydantic import BaseModel, ValidationError

from portfolio_api.core.constants import JWT_ALGORITHM, TOKEN_LIFETIME, utcnow

BEARER_SCHEME = "bearer"


class InvalidTokenError(Exception):
    """Raised when a bearer token is malformed, forged or expired."""


class TokenClaims(BaseModel):
    """Claims carried by an admin access token."""

    sub: str
    iat: int
    exp: int


def issue_token(username: str, secret_key: str, *, now: datetime | None = None) -> str:
    """Return an HS256-signed token for ``username`` valid for one hour."""

    issued_at = now or utcnow()
    payload = {
        "sub": username,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + TOKEN_LIFETIME).timestamp()),
    }
    return jwt.encode(payload, secret_key, algorithm=JWT_ALGORITHM)


def decode_token(token: str, secret_key: str, *, now: datetime | None = None) -> TokenClaims:
    """Verify signature and expiry of ``token`` and return its claims.

    The token is valid only while ``now`` is strictly before ``exp``. Issuer
    and audience are not checked and no clock-skew leeway is granted.
    """

    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[JWT_ALGORITHM],
            options={
                "require": ["sub", "iat", "exp"],
                "verify_exp": False,
                "verify_aud": False,
                "verify_iss": False,
            },
        )
    except jwt.InvalidTokenError as exc:
        raise InvalidTokenError("token is invalid") from exc

    try:
        claims = TokenClaims(**payload)
    except ValidationError as exc:
        raise InvalidTokenError("token claims are malformed") from exc

    if (now or utcnow()).timestamp() >= claims.exp:
        raise InvalidTokenError("token has expired")
    return claims


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""

    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        return None
    return token
