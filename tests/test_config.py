"""Tests for csvinsight.config — Settings class and get_settings() singleton."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

OPTIONAL_ENV_KEYS = ["MODEL_ID", "CORS_ORIGINS", "MAX_UPLOAD_SIZE_MB", "LOG_LEVEL"]


def _set_required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    for key in OPTIONAL_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestSettingsDefaults:
    """Defaults apply when only the API key is set (``.env`` ignored)."""

    def test_model_id_default(self, monkeypatch):
        _set_required_env(monkeypatch)
        from csvinsight.config import Settings

        assert Settings(_env_file=None).model_id == "gemini-2.5-flash"

    def test_cors_origins_default(self, monkeypatch):
        _set_required_env(monkeypatch)
        from csvinsight.config import Settings

        settings = Settings(_env_file=None)
        assert settings.cors_origins == "http://localhost:5173"
        assert settings.cors_list == ["http://localhost:5173"]

    def test_max_upload_size_default(self, monkeypatch):
        _set_required_env(monkeypatch)
        from csvinsight.config import Settings

        assert Settings(_env_file=None).max_upload_size_mb == 10

    def test_log_level_default(self, monkeypatch):
        _set_required_env(monkeypatch)
        from csvinsight.config import Settings

        assert Settings(_env_file=None).log_level == "INFO"


class TestSettingsFromEnv:
    def test_overrides(self, monkeypatch):
        _set_required_env(monkeypatch)
        monkeypatch.setenv("MODEL_ID", "gemini-2.5-pro")
        monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "25")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        from csvinsight.config import Settings

        settings = Settings(_env_file=None)
        assert settings.model_id == "gemini-2.5-pro"
        assert settings.max_upload_size_mb == 25
        assert settings.cors_list == ["http://a.test", "http://b.test"]

    def test_missing_api_key_fails(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        from csvinsight.config import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetSettings:
    def test_returns_cached_instance(self):
        from csvinsight.config import get_settings

        assert get_settings() is get_settings()
