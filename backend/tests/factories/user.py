"""Factory Boy definition for :class:`fintrack.models.user.User`."""

from __future__ import annotations

from fintrack.models.user import User
from werkzeug.security import generate_password_hash

import factory
from tests.factories import BaseFactory
from tests.factories.catalog import LanguageFactory, SexFactory

DEFAULT_PASSWORD = "Passw0rd!"


class UserFactory(BaseFactory):
    """
    Build persisted users.

    Pass ``password="..."`` to hash a specific plaintext; otherwise the
    password is :data:`DEFAULT_PASSWORD`.
    """

    class Meta:
        model = User
        exclude = ("password",)

    id = None  # let autoincrement handle it
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    phone = factory.Sequence(lambda n: f"55{n:08d}")
    sex = factory.SubFactory(SexFactory)
    language = factory.SubFactory(LanguageFactory)
    verify = False

    password = DEFAULT_PASSWORD
    # Low iteration count keeps the suite fast; the hasher reads it back from the digest.
    password_hash = factory.LazyAttribute(
        lambda o: generate_password_hash(o.password, method="pbkdf2:sha256:1000")
    )
