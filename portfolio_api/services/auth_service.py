"""Admin login and bearer-token services."""

from __future__ import annotations

import logging

from portfolio_api.core.security import AdminIdentity, verify_admin_credentials
from portfolio_api.core.tokens import InvalidTokenError, TokenClaims, decode_token, issue_token

logger = logging.getLogger(__name__)


def login_admin(
    identity: AdminIdentity,
    secret_key: str,
    username: str,
    password: str,
) -> str | None:
    """Return a fresh token for valid admin credentials, else ``None``.

    ``AdminNotConfiguredError`` propagates when no admin is configured.
    """

    if not verify_admin_credentials(identity, username, password):
        logger.warning("Rejected admin login for username %r", username)
        return None
    return issue_token(username, secret_key)


def authenticate_bearer(token: str | None, secret_key: str) -> TokenClaims | None:
    """Return the claims of a valid bearer token, or ``None``."""

    if token is None:
        return None
    try:
        return decode_token(token, secret_key)
    except InvalidTokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        return None
