"""Tests for the User model."""

from __future__ import annotations

import pytest
from fintrack.models.user import User
from sqlalchemy.exc import IntegrityError
from tests.factories.catalog import LanguageFactory, SexFactory
from tests.factories.user import UserFactory


def _user(**overrides) -> User:
    fields = {
        "email": "person@example.com",
        "name": "Person",
        "sex": SexFactory(),
        "language": LanguageFactory(),
        "password_hash": "pbkdf2:sha256:1000$salt$digest",
    }
    fields.update(overrides)
    return User(**fields)


class TestUser:
    def test_defaults(self, session):
        u = _user()
        session.add(u)
        session.commit()
        assert u.id is not None
        assert u.verify is False
        assert u.phone is None
        assert u.created_at is not None

    def test_email_is_stripped_not_lowercased(self):
        u = _user(email="  Mixed@Example.com ")
        assert u.email == "Mixed@Example.com"

    @pytest.mark.parametrize("email", ["", "   "])
    def test_blank_email_rejected(self, email):
        with pytest.raises(ValueError, match="Email is required"):
            _user(email=email)

    def test_blank_phone_stored_as_null(self):
        assert _user(phone="  ").phone is None

    def test_email_unique(self, session):
        UserFactory(email="dup@example.com")
        session.add(_user(email="dup@example.com"))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_phone_unique(self, session):
        UserFactory(phone="5512345678")
        session.add(_user(phone="5512345678"))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_users_without_phone_do_not_collide(self, session):
        session.add_all([_user(email="a@example.com"), _user(email="b@example.com")])
        session.commit()

    def test_repr_has_no_secrets(self):
        u = UserFactory.build()
        assert "pbkdf2" not in repr(u)
        assert repr(u).startswith("<User id=")
