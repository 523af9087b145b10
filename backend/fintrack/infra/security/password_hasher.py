# fintrack/infra/security/password_hasher.py
from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from fintrack.services._shared.ports import PasswordHasher


@dataclass(frozen=True, slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Salted PBKDF2-SHA256 hashing via :mod:`werkzeug.security`.

    The work factor is embedded in every digest (``pbkdf2:sha256:<rounds>$salt$hash``),
    so digests produced under an older ``rounds`` value still verify after
    the setting changes.

    .. note::
       A malformed stored digest makes werkzeug raise ``ValueError``. That is
       left to propagate: it signals corrupted data, not a wrong password.
    """

    rounds: int

    def __post_init__(self) -> None:
        if self.rounds <= 0:
            raise ValueError("rounds must be a positive integer")

    @property
    def method(self) -> str:
        return f"pbkdf2:sha256:{self.rounds}"

    def hash(self, plaintext: str) -> str:
        return generate_password_hash(plaintext, method=self.method)

    def compare(self, plaintext: str, hashed: str) -> bool:
        # ``check_password_hash`` is constant-time and untyped; coerce to bool for mypy.
        return bool(check_password_hash(hashed, plaintext))
