"""Tests for RegistrationService (sign-up)."""

from __future__ import annotations

from datetime import date

import pytest
from fintrack.infra.security.password_hasher import WerkzeugPasswordHasher
from fintrack.models.user import User
from fintrack.repositories.user import UserRepository
from fintrack.services._shared.errors import ConflictError, NotFoundError
from fintrack.services.registration.dto import SignUpIn, UserSummaryOut
from fintrack.services.registration.service import RegistrationService
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from tests.factories.catalog import LanguageFactory, SexFactory
from tests.factories.user import UserFactory


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(rounds=1000)


@pytest.fixture()
def service(hasher) -> RegistrationService:
    return RegistrationService(hasher=hasher)


@pytest.fixture()
def catalog_ids(session) -> dict[str, int]:
    return {"sex_id": SexFactory().id, "language_id": LanguageFactory().id}


def _payload(catalog_ids, **overrides) -> SignUpIn:
    fields = {
        "email": "new.user@example.com",
        "name": "Newton",
        "password": "s3cret!",
        "last_name": "User",
        "birthday": date(1990, 5, 17),
        "phone": "5512340000",
        **catalog_ids,
    }
    fields.update(overrides)
    return SignUpIn(**fields)


def _count_users(session) -> int:
    return session.execute(select(func.count(User.id))).scalar_one()


class TestSignUp:
    def test_creates_user_with_hashed_password(self, service, hasher, session, catalog_ids):
        out = service.sign_up(_payload(catalog_ids))

        assert isinstance(out, UserSummaryOut)
        assert out.id is not None
        assert out.email == "new.user@example.com"
        assert out.verify is False
        assert out.birthday == date(1990, 5, 17)
        assert not hasattr(out, "password_hash")

        stored = UserRepository(session=session).get(out.id)
        assert stored.password_hash != "s3cret!"
        assert hasher.compare("s3cret!", stored.password_hash)

    def test_phone_is_optional(self, service, catalog_ids):
        out = service.sign_up(_payload(catalog_ids, phone=None))
        assert out.phone is None

    def test_two_users_without_phone(self, service, catalog_ids):
        service.sign_up(_payload(catalog_ids, email="one@example.com", phone=None))
        service.sign_up(_payload(catalog_ids, email="two@example.com", phone=None))

    def test_duplicate_email(self, service, session, catalog_ids):
        UserFactory(email="taken@example.com")
        before = _count_users(session)

        with pytest.raises(ConflictError, match="email address is already registered"):
            service.sign_up(_payload(catalog_ids, email="taken@example.com"))
        assert _count_users(session) == before

    def test_duplicate_phone(self, service, catalog_ids):
        UserFactory(phone="5500001111")

        with pytest.raises(ConflictError, match="phone number is already registered"):
            service.sign_up(_payload(catalog_ids, phone="5500001111"))

    def test_email_is_checked_before_phone(self, service, catalog_ids):
        UserFactory(email="both@example.com", phone="5500002222")

        with pytest.raises(ConflictError, match="email address"):
            service.sign_up(_payload(catalog_ids, email="both@example.com", phone="5500002222"))

    def test_emails_differing_in_case_are_distinct(self, service, catalog_ids):
        UserFactory(email="case@example.com")
        out = service.sign_up(_payload(catalog_ids, email="Case@Example.com"))
        assert out.email == "Case@Example.com"

    def test_unique_violation_race_maps_to_conflict(self, service, catalog_ids, monkeypatch):
        """A row inserted between the pre-check and the insert still yields a conflict."""
        UserFactory(email="race@example.com")
        monkeypatch.setattr(UserRepository, "get_by_email", lambda self, email: None)

        with pytest.raises(ConflictError, match="email address is already registered") as info:
            service.sign_up(_payload(catalog_ids, email="race@example.com"))
        assert isinstance(info.value.__cause__, IntegrityError)

    @pytest.mark.parametrize(
        ("field", "entity"), [("sex_id", "sex"), ("language_id", "language")]
    )
    def test_unknown_catalog_reference(self, service, session, catalog_ids, field, entity):
        before = _count_users(session)

        with pytest.raises(NotFoundError, match=f"^{entity} not found$") as info:
            service.sign_up(_payload(catalog_ids, **{field: 999_999}))
        assert info.value.key == 999_999
        assert _count_users(session) == before

    def test_unknown_reference_is_rejected_before_hashing(self, catalog_ids):
        class RecordingHasher:
            def __init__(self) -> None:
                self.calls: list[str] = []

            def hash(self, plaintext: str) -> str:
                self.calls.append(plaintext)
                return "digest"

        recorder = RecordingHasher()
        with pytest.raises(NotFoundError, match="language not found"):
            RegistrationService(hasher=recorder).sign_up(
                _payload(catalog_ids, language_id=999_999)
            )
        assert recorder.calls == []
