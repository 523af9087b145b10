"""Service layer public API.

Re-exports
----------
- Base primitives: :class:`BaseService`, :class:`ServiceContext`
- Shared DTOs: :class:`TokenClaim`, :class:`TokenPairOut`
- Registration: :class:`RegistrationService`, :class:`SignUpIn`, :class:`UserSummaryOut`
- Auth: :class:`AuthService`, :class:`SignInIn`, :class:`RefreshIn`
- Accounts: :class:`AccountService`, :class:`AccountCreateIn`,
  :class:`AccountUpdateIn`, :class:`AccountOut`
- Catalog: :class:`CatalogService`, :class:`BankOut`, :class:`AccountTypeOut`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from ._shared.dto import TokenClaim, TokenPairOut
from .accounts.dto import AccountCreateIn, AccountOut, AccountUpdateIn
from .accounts.service import AccountService
from .auth.dto import RefreshIn, SignInIn
from .auth.service import AuthService
from .catalog.dto import AccountTypeOut, BankOut
from .catalog.service import CatalogService
from .registration.dto import SignUpIn, UserSummaryOut
from .registration.service import RegistrationService

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    "TokenClaim",
    "TokenPairOut",
    # Registration
    "RegistrationService",
    "SignUpIn",
    "UserSummaryOut",
    # Auth
    "AuthService",
    "RefreshIn",
    "SignInIn",
    # Accounts
    "AccountService",
    "AccountCreateIn",
    "AccountOut",
    "AccountUpdateIn",
    # Catalog
    "CatalogService",
    "AccountTypeOut",
    "BankOut",
]
