# fintrack/infra/jwt/token_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import jwt

from fintrack.services._shared.dto import TokenClaim
from fintrack.services._shared.ports import TokenService

log = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"
ALGORITHM = "HS256"


@dataclass(frozen=True, slots=True)
class JWTTokenService(TokenService):
    """
    Stateless HS256 token service backed by PyJWT.

    Access and refresh tokens are signed with **different** secrets and carry
    a ``type`` claim, so neither can be replayed in place of the other. The
    payload is limited to the ``{id, name}`` claim plus ``type``, ``jti``,
    ``iat`` and ``exp``.

    :param access_secret: HMAC key for access tokens.
    :param refresh_secret: HMAC key for refresh tokens.
    :param access_ttl: Access token lifetime (15 minutes by default).
    :param refresh_ttl: Refresh token lifetime (7 days by default).
    """

    access_secret: str = field(repr=False)
    refresh_secret: str = field(repr=False)
    access_ttl: timedelta = timedelta(minutes=15)
    refresh_ttl: timedelta = timedelta(days=7)

    # -------------------- issue --------------------

    def generate_access_token(self, claim: TokenClaim) -> str:
        return self._encode(claim, ACCESS_TOKEN_TYPE, self.access_secret, self.access_ttl)

    def generate_refresh_token(self, claim: TokenClaim) -> str:
        return self._encode(claim, REFRESH_TOKEN_TYPE, self.refresh_secret, self.refresh_ttl)

    # -------------------- verify -------------------

    def verify_access_token(self, token: str) -> TokenClaim | None:
        return self._decode(token, ACCESS_TOKEN_TYPE, self.access_secret)

    def verify_refresh_token(self, token: str) -> TokenClaim | None:
        return self._decode(token, REFRESH_TOKEN_TYPE, self.refresh_secret)

    # -------------------- helpers ------------------

    @staticmethod
    def _encode(claim: TokenClaim, token_type: str, secret: str, ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            **claim.as_payload(),
            "type": token_type,
            # Unique per issue so two pairs minted in the same second differ.
            "jti": uuid4().hex,
            "iat": now,
            "exp": now + ttl,
        }
        return jwt.encode(payload, secret, algorithm=ALGORITHM)

    @staticmethod
    def _decode(token: str, token_type: str, secret: str) -> TokenClaim | None:
        if not isinstance(token, str) or not token:
            return None
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as exc:
            log.debug("token.rejected", extra={"event": f"{token_type}:{type(exc).__name__}"})
            return None

        if payload.get("type") != token_type:
            return None
        user_id = payload.get("id")
        name = payload.get("name")
        # bool is an int subclass; a forged ``true`` id must not pass.
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(name, str):
            return None
        return TokenClaim(id=user_id, name=name)
