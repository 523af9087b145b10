"""Unit tests for UserRepository."""

import pytest
from fintrack.repositories.user import UserRepository
from tests.factories.user import UserFactory


class TestUserRepository:
    """Ensure ``UserRepository`` serves the identity lookups."""

    @pytest.fixture()
    def repo(self, session):
        return UserRepository(session=session)

    def test_get_by_email(self, repo):
        u = UserFactory(email="alice@example.com")

        fetched = repo.get_by_email("alice@example.com")
        assert fetched is not None
        assert fetched.id == u.id

    def test_get_by_email_is_exact(self, repo):
        """Lookups match the stored value; only surrounding blanks are ignored."""
        UserFactory(email="bob@example.com")

        assert repo.get_by_email(" bob@example.com ") is not None
        assert repo.get_by_email("Bob@Example.com") is None
        assert repo.get_by_email("nobody@example.com") is None

    def test_get_by_phone(self, repo):
        u = UserFactory(phone="5511112222")

        assert repo.get_by_phone("5511112222").id == u.id
        assert repo.get_by_phone("5599990000") is None

    def test_add_assigns_primary_key(self, repo):
        u = UserFactory.build()
        repo.session.add(u.sex)
        repo.session.add(u.language)

        repo.add(u)
        assert u.id is not None
        assert repo.exists(email=u.email)

    def test_non_whitelisted_filters_are_ignored(self, repo):
        u = UserFactory()

        assert repo.find_one(email=u.email, password_hash="nope").id == u.id
