"""Account repository."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from fintrack.models.account import Account
from fintrack.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Persistence-only repository for :class:`Account`."""

    model = Account

    def _sortable_fields(self):
        return {
            "id": Account.id,
            "name": Account.name,
            "balance": Account.balance,
            "created_at": Account.created_at,
        }

    def _filterable_fields(self):
        return {
            "user_id": Account.user_id,
            "bank_id": Account.bank_id,
            "account_type_id": Account.account_type_id,
        }

    def _updatable_fields(self):
        """Owner (``user_id``) is never reassignable."""
        return {"name", "bank_id", "account_type_id", "balance", "account_number"}

    def get_by_account_number(self, account_number: str) -> Account | None:
        stmt = select(Account).where(Account.account_number == account_number.strip())
        return cast(Account | None, self.session.execute(stmt).scalars().first())

    def list_by_user(self, user_id: int) -> list[Account]:
        """Return every account owned by ``user_id``, oldest first."""
        return self.list(filters={"user_id": user_id}, sort=["created_at"])
