"""
DTOs for AccountService.

The owner never appears in an input DTO: it always comes from the acting
user in :class:`~fintrack.services._shared.base.ServiceContext`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from fintrack.services.catalog.dto import AccountTypeOut, BankOut

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class AccountCreateIn:
    """
    :param name: Label chosen by the user.
    :param bank_id: Bank the account is held at.
    :param account_type_id: Kind of account.
    :param balance: Opening balance.
    :param account_number: 18 to 20 digits, globally unique.
    """

    name: str
    bank_id: int
    account_type_id: int
    balance: Decimal
    account_number: str


@dataclass(frozen=True, slots=True)
class AccountUpdateIn:
    """Partial update; ``None`` means "leave unchanged"."""

    name: str | None = None
    bank_id: int | None = None
    account_type_id: int | None = None
    balance: Decimal | None = None
    account_number: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were provided."""
        return {k: v for k, v in asdict(self).items() if v is not None}


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class AccountOut:
    id: int
    user_id: int
    name: str
    bank_id: int
    account_type_id: int
    balance: Decimal
    account_number: str
    created_at: datetime
    updated_at: datetime
    bank: BankOut | None = None
    account_type: AccountTypeOut | None = None
