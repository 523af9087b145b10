"""Sign-up, sign-in and token refresh endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from fintrack.api.deps import get_password_hasher, get_token_service, success_response, timing
from fintrack.schemas import (
    RefreshTokenSchema,
    SignInSchema,
    SignUpSchema,
    TokenPairSchema,
    UserSummarySchema,
)
from fintrack.services import AuthService, RefreshIn, RegistrationService, SignInIn, SignUpIn

bp = Blueprint("auth", __name__)

sign_up_schema = SignUpSchema()
sign_in_schema = SignInSchema()
refresh_schema = RefreshTokenSchema()
token_pair_schema = TokenPairSchema()
user_summary_schema = UserSummarySchema()


def _auth_service() -> AuthService:
    return AuthService(hasher=get_password_hasher(), tokens=get_token_service())


@bp.post("/signUp")
@timing
def sign_up():
    """Register a user and return its summary."""

    payload = sign_up_schema.load(request.get_json(silent=True) or {})
    service = RegistrationService(hasher=get_password_hasher())
    user = service.sign_up(SignUpIn(**payload))
    return success_response(
        user_summary_schema.dump(user), "user successfully created", status=201
    )


@bp.post("/signIn")
@timing
def sign_in():
    """Exchange email and password for an access/refresh token pair."""

    payload = sign_in_schema.load(request.get_json(silent=True) or {})
    pair = _auth_service().sign_in(SignInIn(**payload))
    return success_response(token_pair_schema.dump(pair), "successful signin")


@bp.post("/refreshToken")
@timing
def refresh_token():
    """Exchange a refresh token for a new token pair."""

    payload = refresh_schema.load(request.get_json(silent=True) or {})
    pair = _auth_service().refresh(RefreshIn(**payload))
    return success_response(token_pair_schema.dump(pair), "token successfully refresh")
