"""Route access table consumed by the auth guard middleware."""

from __future__ import annotations

import re
from typing import NamedTuple


class AccessRule(NamedTuple):
    """One HTTP method and path template with its authorization requirement."""

    method: str
    path_template: str
    auth_required: bool

    def matches(self, method: str, path: str) -> bool:
        return method.upper() == self.method and _compile(self.path_template).match(path) is not None


ACCESS_RULES: tuple[AccessRule, ...] = (
    AccessRule("POST", "/login", auth_required=False),
    AccessRule("GET", "/dashboard", auth_required=True),
    AccessRule("GET", "/projects", auth_required=False),
    AccessRule("GET", "/projects/{id}", auth_required=False),
    AccessRule("POST", "/projects", auth_required=True),
    AccessRule("PUT", "/projects/{id}", auth_required=True),
    AccessRule("DELETE", "/projects/{id}", auth_required=True),
    AccessRule("POST", "/contact", auth_required=False),
    AccessRule("GET", "/contact", auth_required=True),
    AccessRule("DELETE", "/contact/{id}", auth_required=True),
)

_PATTERN_CACHE: dict[str, re.Pattern[str]] = {}


def _compile(path_template: str) -> re.Pattern[str]:
    pattern = _PATTERN_CACHE.get(path_template)
    if pattern is None:
        body = re.sub(r"\\\{[^/]+?\\\}", "[^/]+", re.escape(path_template.rstrip("/")))
        pattern = re.compile(f"^{body}/?$")
        _PATTERN_CACHE[path_template] = pattern
    return pattern


def find_rule(
    method: str,
    path: str,
    rules: tuple[AccessRule, ...] = ACCESS_RULES,
) -> AccessRule | None:
    """Return the first rule matching ``method`` and ``path``."""

    for rule in rules:
        if rule.matches(method, path):
            return rule
    return None


def requires_auth(
    method: str,
    path: str,
    rules: tuple[AccessRule, ...] = ACCESS_RULES,
) -> bool:
    """Return whether a request must carry a valid bearer token."""

    rule = find_rule(method, path, rules)
    return rule is not None and rule.auth_required
