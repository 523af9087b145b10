from fintrack.models.account import Account
from fintrack.models.catalog import AccountType, Bank, Language, Sex
from fintrack.models.user import User

__all__ = [
    "Account",
    "AccountType",
    "Bank",
    "Language",
    "Sex",
    "User",
]
