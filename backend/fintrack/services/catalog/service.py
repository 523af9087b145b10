# fintrack/services/catalog/service.py
from __future__ import annotations

from fintrack.models.catalog import AccountType, Bank
from fintrack.services._shared.base import BaseService
from fintrack.services._shared.errors import NotFoundError
from fintrack.services.catalog.dto import AccountTypeOut, BankOut


class CatalogService(BaseService):
    """Read-only access to banks and account types."""

    def list_banks(self) -> list[BankOut]:
        with self.ro_uow() as uow:
            return [self.to_bank_out(b) for b in uow.banks.list(sort=["name"])]

    def get_bank(self, bank_id: int) -> BankOut:
        """
        :raises NotFoundError: If no bank has this id.
        """
        with self.ro_uow() as uow:
            bank = uow.banks.get(bank_id)
            if bank is None:
                raise NotFoundError("bank", bank_id)
            return self.to_bank_out(bank)

    def list_account_types(self) -> list[AccountTypeOut]:
        with self.ro_uow() as uow:
            return [self.to_account_type_out(t) for t in uow.account_types.list()]

    # ------------------------------------------------------------------ #
    # Mapping
    # ------------------------------------------------------------------ #

    @staticmethod
    def to_bank_out(bank: Bank) -> BankOut:
        return BankOut(id=bank.id, name=bank.name)

    @staticmethod
    def to_account_type_out(account_type: AccountType) -> AccountTypeOut:
        return AccountTypeOut(id=account_type.id, name=account_type.name)
