"""Account-related Marshmallow schemas."""

from __future__ import annotations

from decimal import Decimal

from marshmallow import EXCLUDE, Schema, fields, validate

from .catalog import AccountTypeSchema, BankSchema

ACCOUNT_NUMBER_RULES = [
    validate.Regexp(r"^\d+$", error="accountNumber must contain only digits"),
    validate.Length(min=18, max=20),
]


class AccountCreateSchema(Schema):
    """Input payload for creating an account.

    Unknown keys (notably ``idUser``) are dropped: the owner comes from the
    access token.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=3, max=100))
    bank_id = fields.Integer(
        data_key="idBank", required=True, strict=True, validate=validate.Range(min=1)
    )
    account_type_id = fields.Integer(
        data_key="idAccountType", required=True, strict=True, validate=validate.Range(min=1)
    )
    balance = fields.Decimal(
        required=True,
        places=2,
        validate=validate.Range(min=Decimal("0"), min_inclusive=False),
    )
    account_number = fields.String(
        data_key="accountNumber", required=True, validate=ACCOUNT_NUMBER_RULES
    )


class AccountUpdateSchema(Schema):
    """Partial update payload; every key is optional."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(validate=validate.Length(min=3, max=100))
    bank_id = fields.Integer(data_key="idBank", strict=True, validate=validate.Range(min=1))
    account_type_id = fields.Integer(
        data_key="idAccountType", strict=True, validate=validate.Range(min=1)
    )
    balance = fields.Decimal(
        places=2, validate=validate.Range(min=Decimal("0"), min_inclusive=False)
    )
    account_number = fields.String(data_key="accountNumber", validate=ACCOUNT_NUMBER_RULES)


class AccountSchema(Schema):
    """Response payload for an account, with its bank and type embedded."""

    id = fields.Integer(required=True)
    user_id = fields.Integer(data_key="idUser")
    name = fields.String()
    bank_id = fields.Integer(data_key="idBank")
    account_type_id = fields.Integer(data_key="idAccountType")
    balance = fields.Decimal(places=2, as_string=True)
    account_number = fields.String(data_key="accountNumber")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
    bank = fields.Nested(BankSchema, allow_none=True)
    account_type = fields.Nested(AccountTypeSchema, data_key="accountType", allow_none=True)
