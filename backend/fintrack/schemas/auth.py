"""Authentication-related Marshmallow schemas.

Wire keys are camelCase (``lastName``, ``idSex``, ``accessToken``...); loaded
dicts use the snake_case attribute names expected by the service DTOs.
"""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class SignUpSchema(Schema):
    """Input payload for sign-up."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    name = fields.String(required=True, validate=validate.Length(min=3, max=100))
    last_name = fields.String(
        data_key="lastName",
        load_default=None,
        allow_none=True,
        validate=validate.Length(min=3, max=100),
    )
    birthday = fields.Date(load_default=None, allow_none=True)
    phone = fields.String(
        load_default=None,
        allow_none=True,
        validate=validate.Regexp(r"^\d{10}$", error="phone must be exactly 10 digits"),
    )
    sex_id = fields.Integer(
        data_key="idSex", required=True, strict=True, validate=validate.Range(min=1)
    )
    # "idLenguage" is the established client key.
    language_id = fields.Integer(
        data_key="idLenguage", required=True, strict=True, validate=validate.Range(min=1)
    )
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=6, max=128))


class SignInSchema(Schema):
    """Input payload for sign-in."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class RefreshTokenSchema(Schema):
    """Input payload for the refresh exchange."""

    refresh_token = fields.String(
        data_key="refreshToken", required=True, validate=validate.Length(min=1)
    )


class TokenPairSchema(Schema):
    """Response payload carrying both tokens."""

    access_token = fields.String(data_key="accessToken", required=True)
    refresh_token = fields.String(data_key="refreshToken", required=True)


class UserSummarySchema(Schema):
    """Response payload for a created user; never includes the password hash."""

    id = fields.Integer(required=True)
    email = fields.Email(required=True)
    name = fields.String(required=True)
    last_name = fields.String(data_key="lastName", allow_none=True)
    birthday = fields.Date(allow_none=True)
    phone = fields.String(allow_none=True)
    sex_id = fields.Integer(data_key="idSex")
    language_id = fields.Integer(data_key="idLenguage")
    verify = fields.Boolean()
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
