
"""Shared constants and an ASGI request helper for the test suite."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import bcrypt
from fastapi import FastAPI
from starlette.types import Message, Receive, Scope, Send

from portfolio_api.core.config import Settings

JWT_SECRET = "unit-test-signing-secret-0123456789abcdef"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"
ADMIN_PASSWORD_HASH = bcrypt.hashpw(
    ADMIN_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=4)
).decode("utf-8")

ApiResponse = tuple[int, dict[str, str], Any]


def asgi_request(
    app: FastAPI,
    method: str,
    path: str,
    *,
    json_body: Any = None,
    headers: dict[str, str] | None = None,
    root_path: str = "",
) -> ApiResponse:
    raw_headers: list[tuple[bytes, bytes]] = [(b"host", b"testserver")]
    request_body = b""

    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    if json_body is not None:
        request_body = json.dumps(json_body).encode("utf-8")
        raw_headers.append((b"content-type", b"application/json"))
    raw_headers.append((b"content-length", str(len(request_body)).encode("utf-8")))

    scope: Scope = {
        "type": "http",
        "asgi": {"version": "3.0", "spec_version": "2.3"},
        "http_version": "1.1",
        "method": method.upper(),
        "scheme": "http",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": raw_headers,
        "client": ("testclient", 50000),
        "server": ("testserver", 80),
        "root_path": root_path,
    }

    sent = False

    async def receive() -> Message:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": request_body, "more_body": False}

    messages: list[Message] = []

    async def send(message: Message) -> None:
        messages.append(message)

    receive_fn: Receive = receive
    send_fn: Send = send
    asyncio.run(app(scope, receive_fn, send_fn))

    status_code = 500
    response_headers: dict[str, str] = {}
    body = b""
    for message in messages:
        if message["type"] == "http.response.start":
            status_code = message["status"]
            response_headers = {
                key.decode("latin-1").lower(): value.decode("latin-1")
                for key, value in message.get("headers", [])
            }
        if message["type"] == "http.response.body":
            body += message.get("body", b"")

    payload: Any = None
    if body and response_headers.get("content-type", "").startswith("application/json"):
        payload = json.loads(body)
    elif body:
        payload = body.decode("utf-8", errors="ignore")
    return status_code, response_headers, payload


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "jwt_secret": JWT_SECRET,
        "database_url": "sqlite://",
        "admin_username": ADMIN_USERNAME,
        "admin_password_hash": ADMIN_PASSWORD_HASH,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


