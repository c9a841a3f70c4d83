# tests/test_config.py

import pytest
from pydantic import ValidationError

from lms.adapters.configuration.config import Settings


def load_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestCorsOrigins:

    def test_csv_from_environment(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")
        assert load_settings().CORS_ORIGINS == ["http://a.example", "http://b.example"]

    def test_json_array_from_environment(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["http://a.example", "http://b.example"]')
        assert load_settings().CORS_ORIGINS == ["http://a.example", "http://b.example"]

    def test_single_origin_from_environment(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example")
        assert load_settings().CORS_ORIGINS == ["http://a.example"]

    def test_list_is_kept(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert load_settings(CORS_ORIGINS=["http://a.example"]).CORS_ORIGINS == ["http://a.example"]

    def test_default(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert "http://localhost:4200" in load_settings().CORS_ORIGINS

    def test_broken_json_is_rejected(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["http://a.example"')
        with pytest.raises(ValidationError):
            load_settings()


class TestLogLevel:

    def test_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert load_settings().LOG_LEVEL == "DEBUG"

    def test_unknown_level_is_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            load_settings()


class TestDatabaseUrl:

    def test_explicit_url_wins(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///lms.db")
        assert load_settings().DATABASE_URL == "sqlite+aiosqlite:///lms.db"

    def test_assembled_from_postgres_parts(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("POSTGRES_USER", "lms")
        monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
        monkeypatch.setenv("POSTGRES_HOST", "db")
        monkeypatch.setenv("POSTGRES_PORT", "5433")
        monkeypatch.setenv("POSTGRES_DB", "courses")
        assert load_settings().DATABASE_URL == "postgresql+asyncpg://lms:secret@db:5433/courses"

    def test_test_mode_uses_test_database(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("TEST_MODE", "true")
        monkeypatch.setenv("TEST_POSTGRES_DB", "lms_test")
        assert load_settings().DATABASE_URL.endswith("/lms_test")
