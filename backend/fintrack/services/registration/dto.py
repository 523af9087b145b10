"""
DTOs for RegistrationService.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class SignUpIn:
    """
    Input payload for sign-up.

    :param email: Login email, stored as given.
    :type email: str
    :param name: Display name (appears in token claims).
    :type name: str
    :param password: Plaintext password; only its hash is persisted.
    :type password: str
    :param sex_id: Reference into the ``sexes`` catalog.
    :type sex_id: int
    :param language_id: Reference into the ``languages`` catalog.
    :type language_id: int
    :param last_name: Optional family name.
    :type last_name: str | None
    :param birthday: Optional date of birth.
    :type birthday: date | None
    :param phone: Optional phone number; unique when present.
    :type phone: str | None
    """

    email: str
    name: str
    password: str
    sex_id: int
    language_id: int
    last_name: str | None = None
    birthday: date | None = None
    phone: str | None = None


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserSummaryOut:
    """
    Every stored user field except the password hash.
    """

    id: int
    email: str
    name: str
    last_name: str | None
    birthday: date | None
    phone: str | None
    sex_id: int
    language_id: int
    verify: bool
    created_at: datetime
    updated_at: datetime
