"""
fintrack.services._shared.ports
===============================

*Ports* (hexagonal interfaces) the service layer depends on.

Modules
-------
- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`: salted one-way hashing and comparison.

- :mod:`token_service`:
    Defines :class:`~.TokenService`: access/refresh token issue and verify.

- :mod:`user_directory`:
    Defines :class:`~.UserDirectory`: lookup/creation of user records.

Concrete adapters live under ``fintrack.infra`` and
``fintrack.repositories``; they are built once in the application factory and
injected into services.
"""

from __future__ import annotations

from .password_hasher import PasswordHasher
from .token_service import TokenService
from .user_directory import UserDirectory

__all__ = ["PasswordHasher", "TokenService", "UserDirectory"]
