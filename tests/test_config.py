"""Application Configuration — defaults, env overrides, log_format validation, caching."""

import pytest
from pydantic import ValidationError

from user_api.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.service_name == "user-api"
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
