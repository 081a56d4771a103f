"""Password hashing and admin credential verification."""

from __future__ import annotations

import bcrypt
from pydantic import BaseModel, ConfigDict


class AdminNotConfiguredError(RuntimeError):
    """Raised when the admin username or password hash is not configured."""


class AdminIdentity(BaseModel):
    """The single administrator account, as configured."""

    username: str
    password_hash: str

    model_config = ConfigDict(frozen=True)

    @property
    def is_configured(self) -> bool:
        return bool(self.username.strip()) and bool(self.password_hash.strip())


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""

    hashed_password = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed_password.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify plain password against stored hash."""

    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def verify_admin_credentials(identity: AdminIdentity, username: str, password: str) -> bool:
    """Return whether the submitted pair matches the configured admin.

    Raises ``AdminNotConfiguredError`` when the identity is incomplete, so that
    callers can tell an unset admin apart from a wrong password.
    """

    if not identity.is_configured:
        raise AdminNotConfiguredError("admin username or password hash is not set")
    if username != identity.username:
        return False
    return verify_password(password, identity.password_hash)
