"""Shared DTOs crossing service boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TokenClaim:
    """
    Minimal identity carried inside access and refresh tokens.

    :param id: User identifier.
    :type id: int
    :param name: User display name.
    :type name: str
    """

    id: int
    name: str

    def as_payload(self) -> dict[str, Any]:
        """Return the claim as a JWT payload fragment."""
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True, slots=True)
class TokenPairOut:
    """
    Access and refresh tokens returned together.

    :param access_token: Encoded access JWT.
    :type access_token: str
    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    access_token: str
    refresh_token: str
