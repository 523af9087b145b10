"""Shared API helpers: authorization gate, response envelope and timing."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request

from fintrack.core.errors import Unauthorized
from fintrack.core.extensions import PASSWORD_HASHER_KEY, TOKEN_SERVICE_KEY, get_component
from fintrack.core.logger import ensure_request_id
from fintrack.services._shared.base import ServiceContext
from fintrack.services._shared.dto import TokenClaim
from fintrack.services._shared.ports import PasswordHasher, TokenService

F = TypeVar("F", bound=Callable[..., Any])


UNAUTHORIZED_ACCESS = "unauthorized access"
INVALID_TOKEN = "invalid token"


# ------------------------------ Components -----------------------------------


def get_token_service() -> TokenService:
    return get_component(TOKEN_SERVICE_KEY)  # type: ignore[no-any-return]


def get_password_hasher() -> PasswordHasher:
    return get_component(PASSWORD_HASHER_KEY)  # type: ignore[no-any-return]


# ------------------------------ Authorization --------------------------------


def bearer_token() -> str | None:
    """Return the last whitespace-separated part of ``Authorization``.

    ``Bearer <jwt>`` and a bare ``<jwt>`` both yield the token; a missing or
    blank header yields ``None``.
    """
    parts = request.headers.get("Authorization", "").split()
    return parts[-1] if parts else None


def require_auth(func: F) -> F:
    """Reject the request unless it carries a valid access token.

    On success the decoded claim is stored on ``g.current_user``. On failure
    the wrapped view never runs.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        token = bearer_token()
        if token is None:
            raise Unauthorized(UNAUTHORIZED_ACCESS)
        claim = get_token_service().verify_access_token(token)
        if claim is None:
            raise Unauthorized(INVALID_TOKEN)
        g.current_user = claim
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_claim() -> TokenClaim:
    """Return the claim attached by :func:`require_auth`."""
    claim = g.get("current_user")
    if claim is None:
        raise Unauthorized(UNAUTHORIZED_ACCESS)
    return claim  # type: ignore[no-any-return]


def service_context() -> ServiceContext:
    """Build a :class:`ServiceContext` for the authenticated caller."""
    return ServiceContext(actor_id=current_claim().id, request_id=ensure_request_id())


# ------------------------------ Responses ------------------------------------


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def success_response(data: Any, message: str, *, status: int = 200) -> Response:
    """Wrap ``data`` in the success envelope; ``message`` is upper-cased."""

    return json_response({"success": True, "data": data, "message": message.upper()}, status=status)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
