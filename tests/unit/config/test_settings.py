"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from donare_config.settings import AVATAR_MAX_BYTES, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("API_CORS_ORIGINS", raising=False)
        settings = Settings(
            jwt_secret_key="secret",
            postgres_password="pw",
            _env_file=None,
        )

        assert settings.jwt_access_token_expire_hours == 1
        assert settings.avatar_max_bytes == AVATAR_MAX_BYTES == 5 * 1024 * 1024
        assert settings.api_port == 3000
        assert settings.cors_origins == []

    def test_database_url_uses_asyncpg(self):
        settings = Settings(
            jwt_secret_key="secret",
            postgres_password="pw",
            postgres_host="db",
            postgres_port=5433,
            postgres_user="donare",
            postgres_db="donare_test",
            _env_file=None,
        )

        assert settings.database_url == (
            "postgresql+asyncpg://donare:pw@db:5433/donare_test"
        )

    def test_secrets_are_masked(self):
        settings = Settings(
            jwt_secret_key="very-secret",
            postgres_password="pw",
            _env_file=None,
        )

        assert "very-secret" not in repr(settings)
        assert settings.jwt_secret_key.get_secret_value() == "very-secret"

    def test_cors_origins_split(self):
        settings = Settings(
            jwt_secret_key="secret",
            postgres_password="pw",
            api_cors_origins="http://a.test, http://b.test,",
            _env_file=None,
        )

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
        monkeypatch.setenv("POSTGRES_PASSWORD", "pw")
        monkeypatch.setenv("JWT_ACCESS_TOKEN_EXPIRE_HOURS", "3")

        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key.get_secret_value() == "from-env"
        assert settings.jwt_access_token_expire_hours == 3

    def test_missing_jwt_secret_fails(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(postgres_password="pw", _env_file=None)
