"""Output DTOs for catalog lookups."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BankOut:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class AccountTypeOut:
    id: int
    name: str
