"""Convenience exports for application schemas."""

from __future__ import annotations

from .account import AccountCreateSchema, AccountSchema, AccountUpdateSchema
from .auth import (
    RefreshTokenSchema,
    SignInSchema,
    SignUpSchema,
    TokenPairSchema,
    UserSummarySchema,
)
from .catalog import AccountTypeSchema, BankSchema

__all__ = [
    "AccountCreateSchema",
    "AccountSchema",
    "AccountTypeSchema",
    "AccountUpdateSchema",
    "BankSchema",
    "RefreshTokenSchema",
    "SignInSchema",
    "SignUpSchema",
    "TokenPairSchema",
    "UserSummarySchema",
]
