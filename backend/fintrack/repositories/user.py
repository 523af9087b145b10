"""User repository: identity lookups used by sign-up and sign-in."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from fintrack.models.user import User
from fintrack.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    Implements the ``UserDirectory`` port. It never hashes passwords or
    issues tokens.
    """

    model = User

    def _sortable_fields(self):
        return {"id": User.id, "email": User.email, "created_at": User.created_at}

    def _filterable_fields(self):
        return {"email": User.email, "phone": User.phone}

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by exact email match.

        :param email: Email as submitted; compared as stored.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == email.strip())
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def get_by_phone(self, phone: str) -> User | None:
        """Fetch a user by phone number.

        :param phone: Phone number; blank values never match.
        :type phone: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        phone = (phone or "").strip()
        if not phone:
            return None
        stmt = select(User).where(User.phone == phone)
        return cast(User | None, self.session.execute(stmt).scalars().first())
