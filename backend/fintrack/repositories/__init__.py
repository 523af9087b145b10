"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from fintrack.repositories.account import AccountRepository
from fintrack.repositories.base import BaseRepository, apply_sorting, parse_sort_tokens
from fintrack.repositories.catalog import (
    AccountTypeRepository,
    BankRepository,
    LanguageRepository,
    SexRepository,
)
from fintrack.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "apply_sorting",
    "parse_sort_tokens",
    # Domain
    "AccountRepository",
    "AccountTypeRepository",
    "BankRepository",
    "LanguageRepository",
    "SexRepository",
    "UserRepository",
]
