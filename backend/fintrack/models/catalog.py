"""Read-only lookup tables referenced by users and accounts."""

from __future__ import annotations

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.core.extensions import db

from .base import PKMixin, ReprMixin


class Sex(PKMixin, ReprMixin, db.Model):
    """Sex option selectable at sign-up (``none``, ``Male``, ``Female``)."""

    __tablename__ = "sexes"

    name: Mapped[str] = mapped_column(String(20), nullable=False)

    __table_args__ = (UniqueConstraint("name", name="uq_sexes_name"),)


class Language(PKMixin, ReprMixin, db.Model):
    """
    Preferred UI language of a user.

    Attributes
    ----------
    name:
        Human-readable name, e.g. ``Spanish``.
    code:
        Two-letter ISO 639-1 code, e.g. ``es``.
    """

    __tablename__ = "languages"

    name: Mapped[str] = mapped_column(String(40), nullable=False)
    code: Mapped[str] = mapped_column(String(2), nullable=False)

    __table_args__ = (UniqueConstraint("code", name="uq_languages_code"),)


class Bank(PKMixin, ReprMixin, db.Model):
    """Financial institution an account is held at."""

    __tablename__ = "banks"

    name: Mapped[str] = mapped_column(String(80), nullable=False)

    __table_args__ = (UniqueConstraint("name", name="uq_banks_name"),)


class AccountType(PKMixin, ReprMixin, db.Model):
    """Kind of account (``Debit``, ``Credit``, ``cash``)."""

    __tablename__ = "account_types"

    name: Mapped[str] = mapped_column(String(40), nullable=False)

    __table_args__ = (UniqueConstraint("name", name="uq_account_types_name"),)
