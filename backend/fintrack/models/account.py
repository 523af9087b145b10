"""Bank account owned by a single user."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from fintrack.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .catalog import AccountType, Bank
    from .user import User

ACCOUNT_NUMBER_MIN = 18
ACCOUNT_NUMBER_MAX = 20


class Account(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Account held by a user at a bank.

    Attributes
    ----------
    user_id:
        Owner. Always taken from the authenticated token claim.
    name:
        User-chosen label.
    bank_id, account_type_id:
        Catalog references.
    balance:
        Current balance, two decimal places.
    account_number:
        18 to 20 digits, unique across all users.
    """

    __tablename__ = "accounts"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    bank_id: Mapped[int] = mapped_column(ForeignKey("banks.id"), nullable=False)
    account_type_id: Mapped[int] = mapped_column(ForeignKey("account_types.id"), nullable=False)
    balance: Mapped[Decimal] = mapped_column(
        Numeric(14, 2), nullable=False, default=Decimal("0.00")
    )
    account_number: Mapped[str] = mapped_column(String(ACCOUNT_NUMBER_MAX), nullable=False)

    __table_args__ = (
        UniqueConstraint("account_number", name="uq_accounts_account_number"),
        CheckConstraint(
            f"length(account_number) BETWEEN {ACCOUNT_NUMBER_MIN} AND {ACCOUNT_NUMBER_MAX}",
            name="account_number_length",
        ),
        Index("ix_accounts_user_id", "user_id"),
    )

    user: Mapped[User] = relationship("User", back_populates="accounts")
    bank: Mapped[Bank] = relationship("Bank", lazy="joined")
    account_type: Mapped[AccountType] = relationship("AccountType", lazy="joined")

    @validates("account_number")
    def _check_account_number(self, key: str, value: str) -> str:
        """
        Validate the account number shape.

        :raises ValueError: If it is not 18 to 20 ASCII digits.
        """
        if not isinstance(value, str):
            raise ValueError("Account number must be a string of digits.")
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            raise ValueError("Account number must contain only digits.")
        if not ACCOUNT_NUMBER_MIN <= len(value) <= ACCOUNT_NUMBER_MAX:
            raise ValueError(
                f"Account number must be {ACCOUNT_NUMBER_MIN}-{ACCOUNT_NUMBER_MAX} digits long."
            )
        return value
