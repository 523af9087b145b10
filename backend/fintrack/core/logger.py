"""Structured JSON logging with request correlation and acting-user context.

Every record leaves the process as one JSON line carrying the request id and,
once the access token has been verified, the id of the acting user. Views and
services add ``event`` (and other whitelisted keys) through ``extra={...}``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any
from uuid import uuid4

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
# Inbound headers checked, in order, for a caller-supplied correlation id.
CORRELATION_HEADERS = (REQUEST_ID_HEADER, "X-Correlation-ID")

# Attributes copied from ``extra={...}`` into the JSON payload when present.
EXTRA_KEYS = ("event", "user_id", "status", "endpoint", "elapsed_ms")


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "time": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        payload.update(
            (key, getattr(record, key))
            for key in EXTRA_KEYS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestContextFilter(logging.Filter):
    """Stamp ``request_id`` and, once authorized, ``user_id`` on every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        claim = g.get("current_user") if has_request_context() else None
        if claim is not None and getattr(record, "user_id", None) is None:
            record.user_id = claim.id
        return True


def _incoming_request_id() -> str | None:
    for header in CORRELATION_HEADERS:
        value = request.headers.get(header, "").strip()
        if value:
            return value
    return None


def ensure_request_id() -> str:
    """Return the current request identifier, generating one when necessary.

    Outside a request a fresh id is returned on every call.
    """

    if not has_request_context():
        return str(uuid4())
    if "request_id" not in g:
        g.request_id = _incoming_request_id() or str(uuid4())
    return g.request_id  # type: ignore[no-any-return]


def configure_logging(level: str | int = "INFO", *, stream: IO[str] | None = None) -> None:
    """Route the root logger to a single JSON handler.

    :param level: Level name (case-insensitive) or numeric level.
    :param stream: Destination, ``sys.stdout`` by default.
    """

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestContextFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def init_app(app: Flask) -> None:
    """Seed the request id early and echo it back on every response."""

    app.logger.addFilter(RequestContextFilter())

    @app.before_request
    def _reset_request_state() -> None:
        # ``g`` outlives the request when an app context is already pushed.
        g.pop("request_id", None)
        g.pop("current_user", None)
        ensure_request_id()

    @app.after_request
    def _echo_request_id(response):
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = [
    "JSONFormatter",
    "RequestContextFilter",
    "configure_logging",
    "ensure_request_id",
    "init_app",
]
