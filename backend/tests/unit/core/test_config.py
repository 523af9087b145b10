"""Tests for configuration loading and authentication settings."""

from __future__ import annotations

from datetime import timedelta

import pytest
from fintrack.core.config import (
    AuthSettings,
    ConfigurationError,
    DevelopmentConfig,
    TestingConfig,
    env_bool,
    env_int,
    get_config,
)
from fintrack.factory import create_app

VALID = {
    "ACCESS_TOKEN_SECRET": "a-secret",
    "REFRESH_TOKEN_SECRET": "r-secret",
    "PASSWORD_HASH_ROUNDS": 1000,
    "ACCESS_TOKEN_TTL": 900,
    "REFRESH_TOKEN_TTL": 604800,
}


class TestAuthSettings:
    def test_from_mapping_builds_settings(self):
        settings = AuthSettings.from_mapping(VALID)
        assert settings.access_secret == "a-secret"
        assert settings.refresh_secret == "r-secret"
        assert settings.access_ttl == timedelta(minutes=15)
        assert settings.refresh_ttl == timedelta(days=7)
        assert settings.hash_rounds == 1000

    def test_lifetimes_fall_back_to_defaults(self):
        config = {k: v for k, v in VALID.items() if not k.endswith("_TTL")}
        settings = AuthSettings.from_mapping(config)
        assert settings.access_ttl == timedelta(minutes=15)
        assert settings.refresh_ttl == timedelta(days=7)

    @pytest.mark.parametrize(
        "key", ["ACCESS_TOKEN_SECRET", "REFRESH_TOKEN_SECRET", "PASSWORD_HASH_ROUNDS"]
    )
    def test_missing_required_setting(self, key):
        config = {**VALID, key: None}
        with pytest.raises(ConfigurationError, match=key):
            AuthSettings.from_mapping(config)

    def test_empty_secret_counts_as_missing(self):
        with pytest.raises(ConfigurationError, match="Missing.*ACCESS_TOKEN_SECRET"):
            AuthSettings.from_mapping({**VALID, "ACCESS_TOKEN_SECRET": ""})

    def test_secrets_must_differ(self):
        config = {**VALID, "REFRESH_TOKEN_SECRET": VALID["ACCESS_TOKEN_SECRET"]}
        with pytest.raises(ConfigurationError, match="must differ"):
            AuthSettings.from_mapping(config)

    @pytest.mark.parametrize(
        "override",
        [
            {"PASSWORD_HASH_ROUNDS": -1},
            {"PASSWORD_HASH_ROUNDS": 0},
            {"ACCESS_TOKEN_TTL": -60},
            {"ACCESS_TOKEN_TTL": 0},
            {"REFRESH_TOKEN_TTL": -1},
            {"REFRESH_TOKEN_TTL": 0},
        ],
    )
    def test_non_positive_values(self, override):
        with pytest.raises(ConfigurationError, match="positive"):
            AuthSettings.from_mapping({**VALID, **override})


class TestEnvironment:
    def test_get_config_defaults_to_development(self, monkeypatch):
        monkeypatch.delenv("APP_ENV", raising=False)
        assert get_config() is DevelopmentConfig

    def test_get_config_reads_app_env(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", " Testing ")
        assert get_config() is TestingConfig

    def test_env_bool(self, monkeypatch):
        monkeypatch.setenv("SOME_FLAG", "Yes")
        assert env_bool("SOME_FLAG") is True
        monkeypatch.setenv("SOME_FLAG", "off")
        assert env_bool("SOME_FLAG", True) is False
        monkeypatch.delenv("SOME_FLAG")
        assert env_bool("SOME_FLAG", True) is True

    def test_env_int(self, monkeypatch):
        monkeypatch.setenv("SOME_INT", "30")
        assert env_int("SOME_INT") == 30
        monkeypatch.setenv("SOME_INT", "  ")
        assert env_int("SOME_INT", 5) == 5


class TestCreateApp:
    def test_refuses_to_start_without_token_secrets(self):
        class NoSecrets(TestingConfig):
            ACCESS_TOKEN_SECRET = None
            REFRESH_TOKEN_SECRET = None

        with pytest.raises(ConfigurationError):
            create_app(NoSecrets, instance_relative_config=False)

    def test_components_are_built_once(self, app):
        hasher = app.extensions["password_hasher"]
        tokens = app.extensions["token_service"]
        assert hasher.rounds == TestingConfig.PASSWORD_HASH_ROUNDS
        assert tokens.access_ttl == timedelta(seconds=TestingConfig.ACCESS_TOKEN_TTL)
        assert app.extensions["auth_settings"].hash_rounds == hasher.rounds
