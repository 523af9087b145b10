"""
AccountService
==============

CRUD over the acting user's bank accounts.

- The owner is always ``ctx.actor_id``; reading or changing another user's
  account raises :class:`ForbiddenError`.
- Account numbers are unique across all users; duplicates raise
  :class:`ConflictError`, including when a concurrent insert wins the race.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from fintrack.models.account import Account
from fintrack.services._shared.base import BaseService
from fintrack.services._shared.errors import ConflictError, NotFoundError, violates
from fintrack.services.accounts.dto import AccountCreateIn, AccountOut, AccountUpdateIn
from fintrack.services.catalog.service import CatalogService
from fintrack.uow.sqlalchemy_uow import SQLAlchemyRepositoryContainer

log = logging.getLogger(__name__)

ACCOUNT_NUMBER_TAKEN = "account number is already registered"
NOT_OWNER = "account does not belong to the user"


class AccountService(BaseService):
    """Bank accounts owned by the authenticated user."""

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create(self, dto: AccountCreateIn) -> AccountOut:
        """
        Create an account for the acting user.

        :param dto: Account fields.
        :returns: The stored account.
        :raises NotFoundError: If the bank or account type does not exist.
        :raises ConflictError: If the account number is already registered.
        """
        user_id = self.require_actor()
        try:
            with self.rw_uow() as uow:
                self._ensure_references(uow, dto.bank_id, dto.account_type_id)
                if uow.accounts.get_by_account_number(dto.account_number) is not None:
                    raise ConflictError(ACCOUNT_NUMBER_TAKEN)

                account = Account(
                    user_id=user_id,
                    name=dto.name,
                    bank_id=dto.bank_id,
                    account_type_id=dto.account_type_id,
                    balance=dto.balance,
                    account_number=dto.account_number,
                )
                uow.accounts.add(account)
                out = self.to_out(account)
        except IntegrityError as exc:
            if not violates(exc, "uq_accounts_account_number", "accounts.account_number"):
                raise
            raise ConflictError(ACCOUNT_NUMBER_TAKEN) from exc

        log.info("account.created", extra={"event": "account_create", "user_id": user_id})
        return out

    def update(self, account_id: int, dto: AccountUpdateIn) -> AccountOut:
        """
        Apply a partial update.

        :raises NotFoundError: If the account, or a newly referenced bank or
            account type, does not exist.
        :raises ForbiddenError: If the account belongs to another user.
        :raises ConflictError: If the new account number is held by another account.
        """
        changes = dto.changes()
        try:
            with self.rw_uow() as uow:
                account = self._get_owned(uow, account_id)
                self._ensure_references(uow, dto.bank_id, dto.account_type_id)

                if dto.account_number is not None:
                    holder = uow.accounts.get_by_account_number(dto.account_number)
                    if holder is not None and holder.id != account.id:
                        raise ConflictError(ACCOUNT_NUMBER_TAKEN)

                if changes:
                    uow.accounts.update(account, **changes)
                    # Relationships are not refreshed by assigning FK columns.
                    uow.session.refresh(account)
                out = self.to_out(account)
        except IntegrityError as exc:
            if not violates(exc, "uq_accounts_account_number", "accounts.account_number"):
                raise
            raise ConflictError(ACCOUNT_NUMBER_TAKEN) from exc
        return out

    def delete(self, account_id: int) -> None:
        """
        Hard-delete an account.

        :raises NotFoundError: If the account does not exist.
        :raises ForbiddenError: If the account belongs to another user.
        """
        with self.rw_uow() as uow:
            account = self._get_owned(uow, account_id)
            uow.accounts.delete(account)
        log.info(
            "account.deleted",
            extra={"event": "account_delete", "user_id": self.ctx.actor_id},
        )

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def get(self, account_id: int) -> AccountOut:
        with self.ro_uow() as uow:
            return self.to_out(self._get_owned(uow, account_id))

    def list(self) -> list[AccountOut]:
        user_id = self.require_actor()
        with self.ro_uow() as uow:
            return [self.to_out(a) for a in uow.accounts.list_by_user(user_id)]

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _get_owned(self, uow: SQLAlchemyRepositoryContainer, account_id: int) -> Account:
        account = uow.accounts.get(account_id)
        if account is None:
            raise NotFoundError("account", account_id)
        self.ensure_owner(account.user_id, msg=NOT_OWNER)
        return account

    @staticmethod
    def _ensure_references(
        uow: SQLAlchemyRepositoryContainer,
        bank_id: int | None,
        account_type_id: int | None,
    ) -> None:
        if bank_id is not None and uow.banks.get(bank_id) is None:
            raise NotFoundError("bank", bank_id)
        if account_type_id is not None and uow.account_types.get(account_type_id) is None:
            raise NotFoundError("account type", account_type_id)

    @staticmethod
    def to_out(account: Account) -> AccountOut:
        return AccountOut(
            id=account.id,
            user_id=account.user_id,
            name=account.name,
            bank_id=account.bank_id,
            account_type_id=account.account_type_id,
            balance=account.balance,
            account_number=account.account_number,
            created_at=account.created_at,
            updated_at=account.updated_at,
            bank=CatalogService.to_bank_out(account.bank) if account.bank else None,
            account_type=(
                CatalogService.to_account_type_out(account.account_type)
                if account.account_type
                else None
            ),
        )
