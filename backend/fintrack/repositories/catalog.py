"""Repositories for the read-only catalog tables."""

from __future__ import annotations

from fintrack.models.catalog import AccountType, Bank, Language, Sex
from fintrack.repositories.base import BaseRepository


class SexRepository(BaseRepository[Sex]):
    model = Sex


class LanguageRepository(BaseRepository[Language]):
    model = Language


class BankRepository(BaseRepository[Bank]):
    model = Bank

    def _sortable_fields(self):
        return {"id": Bank.id, "name": Bank.name}


class AccountTypeRepository(BaseRepository[AccountType]):
    model = AccountType
