"""Print a bcrypt hash suitable for ``ADMIN_PASSWORD_HASH``."""

from __future__ import annotations

import getpass
import sys

from portfolio_api.core.security import hash_password


def main() -> int:
    password = getpass.getpass("Admin password: ")
    if not password:
        print("Password must not be empty.", file=sys.stderr)
        return 1
    if getpass.getpass("Repeat password: ") != password:
        print("Passwords do not match.", file=sys.stderr)
        return 1
    print(hash_password(password))
    return 0


if __name__ == "__main__":
    sys.exit(main())
