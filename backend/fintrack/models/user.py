"""User identity model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, ForeignKey, String, UniqueConstraint, false
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from fintrack.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .account import Account
    from .catalog import Language, Sex


class User(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Registered person owning accounts.

    Rows are created once by sign-up and never hold a plaintext password.

    Fields
    ------
    email : str
        Login email, unique and compared exactly as stored.
    name : str
        Display name; part of every token claim.
    last_name : str | None
        Optional family name.
    birthday : date | None
        Optional date of birth.
    phone : str | None
        Optional phone number, unique when present.
    sex_id, language_id : int
        References into the ``sexes`` and ``languages`` catalogs.
    password_hash : str
        Salted one-way hash produced by the password hasher port.
    verify : bool
        Email verification flag. Starts ``False``; no flow flips it yet.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(254), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(100))
    birthday: Mapped[date | None] = mapped_column(Date)
    phone: Mapped[str | None] = mapped_column(String(20))
    sex_id: Mapped[int] = mapped_column(ForeignKey("sexes.id"), nullable=False)
    language_id: Mapped[int] = mapped_column(ForeignKey("languages.id"), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    verify: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        UniqueConstraint("phone", name="uq_users_phone"),
    )

    sex: Mapped[Sex] = relationship("Sex", lazy="joined")
    language: Mapped[Language] = relationship("Language", lazy="joined")
    accounts: Mapped[list[Account]] = relationship(
        "Account",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    @validates("email")
    def _check_email(self, key: str, value: str) -> str:
        """
        Reject empty emails; format checks happen at the API boundary.

        :raises ValueError: If ``value`` is blank.
        """
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Email is required.")
        return value.strip()

    @validates("phone")
    def _blank_phone_is_null(self, key: str, value: str | None) -> str | None:
        # "" would collide on the unique index; store absent phones as NULL.
        if value is None:
            return None
        value = value.strip()
        return value or None
