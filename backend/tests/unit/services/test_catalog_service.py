"""Tests for CatalogService."""

from __future__ import annotations

import pytest
from fintrack.services._shared.errors import NotFoundError
from fintrack.services.catalog.dto import BankOut
from fintrack.services.catalog.service import CatalogService
from tests.factories.catalog import AccountTypeFactory, BankFactory


@pytest.fixture()
def service() -> CatalogService:
    return CatalogService()


def test_list_banks_sorted_by_name(service, session):
    BankFactory(name="Zeta Bank")
    BankFactory(name="Alpha Bank")

    names = [b.name for b in service.list_banks()]
    assert names.index("Alpha Bank") < names.index("Zeta Bank")


def test_get_bank(service, session):
    bank = BankFactory(name="Banco Centro")
    assert service.get_bank(bank.id) == BankOut(id=bank.id, name="Banco Centro")


def test_get_missing_bank(service):
    with pytest.raises(NotFoundError, match="bank not found"):
        service.get_bank(555555)


def test_list_account_types(service, session):
    saving = AccountTypeFactory(name="saving")
    assert saving.id in {t.id for t in service.list_account_types()}
