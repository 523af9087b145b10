from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fintrack.models.user import User


class UserDirectory(Protocol):
    """Port for looking up and creating user identity records.

    :class:`fintrack.repositories.user.UserRepository` is the production
    implementation; any object with these methods can stand in for it.
    """

    def get(self, entity_id: int) -> User | None: ...

    def get_by_email(self, email: str) -> User | None: ...

    def get_by_phone(self, phone: str) -> User | None: ...

    def add(self, instance: User) -> User: ...
