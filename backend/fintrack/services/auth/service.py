# fintrack/services/auth/service.py
from __future__ import annotations

import logging

from fintrack.services._shared.base import BaseService, ServiceContext
from fintrack.services._shared.dto import TokenClaim, TokenPairOut
from fintrack.services._shared.errors import ForbiddenError, UnauthorizedError
from fintrack.services._shared.ports import PasswordHasher, TokenService, UserDirectory
from fintrack.services.auth.dto import RefreshIn, SignInIn

log = logging.getLogger(__name__)

USER_NOT_FOUND = "user not found"
INCORRECT_PASSWORD = "incorrect password"
INVALID_REFRESH_TOKEN = "invalid refresh token"


class AuthService(BaseService):
    """
    Sign-in and token refresh.

    Tokens are stateless: sign-in and refresh persist nothing, and refresh
    never reads the user directory.

    :param hasher: Password hashing port.
    :param tokens: Token issue/verify port.
    """

    def __init__(
        self,
        *,
        hasher: PasswordHasher,
        tokens: TokenService,
        ctx: ServiceContext | None = None,
    ) -> None:
        super().__init__(ctx=ctx)
        self.hasher = hasher
        self.tokens = tokens

    # ------------------------------------------------------------------ #
    # Sign-in
    # ------------------------------------------------------------------ #

    def sign_in(self, dto: SignInIn) -> TokenPairOut:
        """
        Verify credentials and issue a token pair.

        :param dto: Sign-in input.
        :returns: Access/refresh token pair.
        :raises UnauthorizedError: If no user has this email.
        :raises ForbiddenError: If the password does not match.
        """
        with self.ro_uow() as uow:
            users: UserDirectory = uow.users
            user = users.get_by_email(dto.email)
            if user is None:
                log.info("signin.rejected", extra={"event": "unknown_email"})
                raise UnauthorizedError(USER_NOT_FOUND)

            if not self.hasher.compare(dto.password, user.password_hash):
                log.info(
                    "signin.rejected",
                    extra={"event": "bad_password", "user_id": user.id},
                )
                raise ForbiddenError(INCORRECT_PASSWORD)

            claim = TokenClaim(id=user.id, name=user.name)

        log.info("signin.succeeded", extra={"event": "signin", "user_id": claim.id})
        return self._issue(claim)

    # ------------------------------------------------------------------ #
    # Refresh
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> TokenPairOut:
        """
        Exchange a valid refresh token for a brand-new pair.

        Both tokens are rotated. The previous refresh token stays valid until
        it expires, since nothing is stored server-side.

        :param dto: Refresh input.
        :returns: Fresh access/refresh token pair for the same claim.
        :raises UnauthorizedError: If the refresh token does not verify.
        """
        claim = self.tokens.verify_refresh_token(dto.refresh_token)
        if claim is None:
            log.info("refresh.rejected", extra={"event": "invalid_refresh_token"})
            raise UnauthorizedError(INVALID_REFRESH_TOKEN)

        log.info("refresh.succeeded", extra={"event": "refresh", "user_id": claim.id})
        return self._issue(claim)

    def _issue(self, claim: TokenClaim) -> TokenPairOut:
        return TokenPairOut(
            access_token=self.tokens.generate_access_token(claim),
            refresh_token=self.tokens.generate_refresh_token(claim),
        )
