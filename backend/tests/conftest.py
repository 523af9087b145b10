"""Pytest fixtures configuring an isolated transactional database layer.

Each test runs inside a transaction against an in-memory SQLite database that
is rolled back afterwards, so data changes never leak between cases. Sessions
join that transaction through SAVEPOINTs, which lets service code call
``commit()``/``rollback()`` freely.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import pytest
from fintrack.core.config import TestingConfig
from fintrack.core.extensions import db as _db  # Flask-SQLAlchemy instance
from fintrack.core.extensions import TOKEN_SERVICE_KEY
from fintrack.factory import create_app  # application factory under test
from fintrack.services._shared.dto import TokenClaim
from sqlalchemy import event
from sqlalchemy.orm import scoped_session, sessionmaker


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing."""
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestingConfig)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture(scope="session")
def db(app):
    """Create database tables once per test session.

    pysqlite normally defers ``BEGIN`` until the first DML statement, which
    turns the first SAVEPOINT into the outermost transaction and makes its
    RELEASE a real commit. Taking over ``BEGIN`` keeps every SAVEPOINT nested
    inside the per-test transaction.
    """
    with app.app_context():
        engine = _db.engine

        @event.listens_for(engine, "connect")
        def _disable_pysqlite_begin(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine, "begin")
        def _emit_begin(conn):
            conn.exec_driver_sql("BEGIN")

        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(db):
    """Keep a dedicated connection open for the whole session."""
    conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def session(db, connection):
    """Provide a scoped session bound to a per-test outer transaction.

    Notes
    -----
    ``join_transaction_mode="create_savepoint"`` makes every session-level
    commit release a SAVEPOINT instead of committing the outer transaction,
    which is rolled back when the test ends.
    """
    top_trans = connection.begin()

    SessionFactory = sessionmaker(
        bind=connection,
        join_transaction_mode="create_savepoint",
        autoflush=False,
        expire_on_commit=False,
    )
    scoped = scoped_session(SessionFactory)

    # Route application code through this session
    original_session = db.session
    db.session.remove()
    db.session = scoped

    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = original_session
        top_trans.rollback()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """
    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the transactional session fixture."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield


# -- HTTP helpers ---------------------------------------------------------------
@pytest.fixture()
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def token_service(app):
    """Return the token service built by the application factory."""
    return app.extensions[TOKEN_SERVICE_KEY]


@pytest.fixture()
def user(session):
    """Persist and return a user whose password is ``Passw0rd!``."""
    from tests.factories.user import UserFactory

    return UserFactory()


@pytest.fixture()
def auth_header(token_service, user) -> dict[str, str]:
    """Authorization header carrying a valid access token for ``user``."""
    token = token_service.generate_access_token(TokenClaim(id=user.id, name=user.name))
    return {"Authorization": f"Bearer {token}"}
