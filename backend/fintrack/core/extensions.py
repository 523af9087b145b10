"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from typing import Any

from flask import Flask, current_app
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from fintrack.core.config import AuthSettings

# Global naming convention for all constraints. Services match IntegrityError
# messages against these names, so keep them stable.
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)

PASSWORD_HASHER_KEY = "password_hasher"
TOKEN_SERVICE_KEY = "token_service"


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, migrations, and the authentication components.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`fintrack.models` package to ensure SQLAlchemy metadata is ready
        for migrations.

    Raises
    ------
    fintrack.core.config.ConfigurationError
        When token secrets or the hashing work factor are missing.
    """
    db.init_app(app)

    # Ensure models are imported so Alembic sees metadata
    from fintrack import models as _models  # noqa: F401

    migrate.init_app(app, db)

    # Built once per process and shared read-only by every request.
    from fintrack.infra.jwt.token_service import JWTTokenService
    from fintrack.infra.security.password_hasher import WerkzeugPasswordHasher

    settings = AuthSettings.from_mapping(app.config)
    app.extensions["auth_settings"] = settings
    app.extensions[PASSWORD_HASHER_KEY] = WerkzeugPasswordHasher(rounds=settings.hash_rounds)
    app.extensions[TOKEN_SERVICE_KEY] = JWTTokenService(
        access_secret=settings.access_secret,
        refresh_secret=settings.refresh_secret,
        access_ttl=settings.access_ttl,
        refresh_ttl=settings.refresh_ttl,
    )


def get_component(key: str) -> Any:
    """Return an authentication component registered on the current app."""
    try:
        return current_app.extensions[key]
    except KeyError as exc:
        raise RuntimeError(f"Component {key!r} is not initialized. Call init_app() first.") from exc
