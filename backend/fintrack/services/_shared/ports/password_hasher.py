from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """Port for one-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """Return a salted hash; two calls with the same input differ."""
        ...

    def compare(self, plaintext: str, hashed: str) -> bool:
        """Return ``True`` when ``plaintext`` matches ``hashed``.

        Mismatches return ``False``; a malformed ``hashed`` value raises.
        """
        ...
