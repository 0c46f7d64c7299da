"""Tests for config — environment driven settings."""

from __future__ import annotations

from config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("APP_NAME", "DEBUG", "DEFAULT_ENCODING", "CORS_ORIGINS", "MAX_REQUEST_SIZE"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.APP_NAME == "Compares"
        assert settings.DEBUG is False
        assert settings.DEFAULT_ENCODING == "json"
        assert settings.CORS_ORIGINS == "*"
        assert settings.MAX_REQUEST_SIZE == 10 * 1024 * 1024

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("DEFAULT_ENCODING", "yaml")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("MAX_REQUEST_SIZE", "1024")
        settings = Settings(_env_file=None)
        assert settings.DEFAULT_ENCODING == "yaml"
        assert settings.DEBUG is True
        assert settings.MAX_REQUEST_SIZE == 1024
