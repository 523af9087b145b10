"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

DEFAULT_ACCESS_TOKEN_TTL: Final[int] = 15 * 60
DEFAULT_REFRESH_TOKEN_TTL: Final[int] = 7 * 24 * 60 * 60

# Loads .env in development (no-op when the file is missing)
load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing or unsafe."""


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int | None = None) -> int | None:
    """Parse an integer from an environment variable, ``default`` when unset."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str | None
        Flask secret used for session signing.
    ACCESS_TOKEN_SECRET: str | None
        HMAC secret for access tokens. Required.
    REFRESH_TOKEN_SECRET: str | None
        HMAC secret for refresh tokens. Required and distinct from the access
        secret.
    ACCESS_TOKEN_TTL: int
        Access token lifetime in seconds (15 minutes by default).
    REFRESH_TOKEN_TTL: int
        Refresh token lifetime in seconds (7 days by default).
    PASSWORD_HASH_ROUNDS: int | None
        PBKDF2 iteration count used by the password hasher. Required.
    SQLALCHEMY_DATABASE_URI: str
        Database connection string consumed by SQLAlchemy.
    SQLALCHEMY_TRACK_MODIFICATIONS: bool
        Disabled to avoid extra overhead from the event system.
    SQLALCHEMY_ECHO: bool
        When ``True`` SQLAlchemy logs SQL statements for debugging.
    PROPAGATE_EXCEPTIONS: bool
        Controls Flask error propagation.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are sourced from environment variables. Secrets have no fallback
    so a misconfigured deployment refuses to start instead of signing tokens
    with a well-known key.
    """

    API_BASE_PREFIX = "/api"

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY")
    ACCESS_TOKEN_SECRET = os.getenv("ACCESS_TOKEN_SECRET")
    REFRESH_TOKEN_SECRET = os.getenv("REFRESH_TOKEN_SECRET")
    ACCESS_TOKEN_TTL = env_int("ACCESS_TOKEN_TTL", DEFAULT_ACCESS_TOKEN_TTL)
    REFRESH_TOKEN_TTL = env_int("REFRESH_TOKEN_TTL", DEFAULT_REFRESH_TOKEN_TTL)
    PASSWORD_HASH_ROUNDS = env_int("PASSWORD_HASH_ROUNDS")

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./dev.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default and honors ``SQLALCHEMY_ECHO`` for verbose
    SQL logging when requested.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    - Ships throwaway token secrets and a low hashing cost to keep suites fast.
    """

    TESTING = True
    DEBUG = False
    SECRET_KEY = "testing-secret-key"
    ACCESS_TOKEN_SECRET = "testing-access-secret"
    REFRESH_TOKEN_SECRET = "testing-refresh-secret"
    PASSWORD_HASH_ROUNDS = 1000
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    PROPAGATE_EXCEPTIONS = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug and SQL echoing disabled while relying on WSGI-level log
    configuration for noise control.
    """

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def _int_or_default(value: Any, default: int) -> int:
    # Only an unset value falls back; an explicit 0 stays 0.
    return default if value is None else int(value)


@dataclass(frozen=True, slots=True)
class AuthSettings:
    """
    Immutable authentication settings resolved once at startup.

    :param access_secret: HMAC key for access tokens.
    :type access_secret: str
    :param refresh_secret: HMAC key for refresh tokens.
    :type refresh_secret: str
    :param access_ttl: Access token lifetime.
    :type access_ttl: timedelta
    :param refresh_ttl: Refresh token lifetime.
    :type refresh_ttl: timedelta
    :param hash_rounds: Password hashing work factor (PBKDF2 iterations).
    :type hash_rounds: int
    """

    access_secret: str
    refresh_secret: str
    access_ttl: timedelta
    refresh_ttl: timedelta
    hash_rounds: int

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> AuthSettings:
        """
        Build settings from a Flask config mapping, failing fast on gaps.

        :param config: Mapping such as ``app.config``.
        :type config: Mapping[str, Any]
        :returns: Validated settings.
        :rtype: AuthSettings
        :raises ConfigurationError: When a secret or the work factor is
            missing, when the secrets are equal, or when a value is not
            positive.
        """
        missing = [
            key
            for key in ("ACCESS_TOKEN_SECRET", "REFRESH_TOKEN_SECRET", "PASSWORD_HASH_ROUNDS")
            if config.get(key) in (None, "")
        ]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

        access_secret = str(config["ACCESS_TOKEN_SECRET"])
        refresh_secret = str(config["REFRESH_TOKEN_SECRET"])
        if access_secret == refresh_secret:
            raise ConfigurationError("ACCESS_TOKEN_SECRET and REFRESH_TOKEN_SECRET must differ.")

        access_ttl = _int_or_default(config.get("ACCESS_TOKEN_TTL"), DEFAULT_ACCESS_TOKEN_TTL)
        refresh_ttl = _int_or_default(config.get("REFRESH_TOKEN_TTL"), DEFAULT_REFRESH_TOKEN_TTL)
        rounds = int(config["PASSWORD_HASH_ROUNDS"])
        if min(access_ttl, refresh_ttl, rounds) <= 0:
            raise ConfigurationError("Token lifetimes and hash rounds must be positive.")

        return cls(
            access_secret=access_secret,
            refresh_secret=refresh_secret,
            access_ttl=timedelta(seconds=access_ttl),
            refresh_ttl=timedelta(seconds=refresh_ttl),
            hash_rounds=rounds,
        )
