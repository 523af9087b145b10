from __future__ import annotations

from typing import Protocol

from fintrack.services._shared.dto import TokenClaim


class TokenService(Protocol):
    """Port for issuing and verifying access/refresh tokens.

    Verification never raises: any invalid, expired, tampered or
    wrong-type token yields ``None``.
    """

    def generate_access_token(self, claim: TokenClaim) -> str: ...

    def generate_refresh_token(self, claim: TokenClaim) -> str: ...

    def verify_access_token(self, token: str) -> TokenClaim | None: ...

    def verify_refresh_token(self, token: str) -> TokenClaim | None: ...
