"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or HTTP
helpers. They are stable contracts between repositories, domain models and
application services; ``fintrack/core/errors.py`` maps each of them 1:1 to an
HTTP status. Their ``str()`` is the client-facing message.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str, column: str | None = None) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL reports the constraint name; SQLite only reports
    ``table.column``, hence the optional ``column`` fallback.

    :param exc: The exception raised by SQLAlchemy during flush/commit.
    :type exc: IntegrityError
    :param constraint_name: Database constraint name (e.g. ``uq_users_email``).
    :type constraint_name: str
    :param column: Qualified column (e.g. ``users.email``) for SQLite.
    :type column: str | None
    :returns: ``True`` if the IntegrityError matches the given constraint.
    :rtype: bool
    """
    message = str(exc.orig).lower() if exc.orig else ""
    if constraint_name.lower() in message:
        return True
    return column is not None and column.lower() in message


# --------------------------------------------------------------------------- #
# Base type
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories or domain logic.
    """

    default_message = "Service error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class ConflictError(ServiceError):
    """A unique constraint or business rule conflict (email, phone, account number)."""

    default_message = "Conflict"


class UnauthorizedError(ServiceError):
    """The caller could not be identified (unknown user, invalid token)."""

    default_message = "unauthorized access"


class ForbiddenError(ServiceError):
    """The caller is identified but not allowed (wrong password, foreign resource)."""

    default_message = "forbidden"


class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., ``"account"``).
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int | None
    """

    def __init__(self, entity: str, key: str | int | None = None) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found")
