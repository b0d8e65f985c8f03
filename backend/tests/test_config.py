"""Settings — defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from transfer_orders.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("INITIAL_SEQUENCE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8000
    assert settings.initial_sequence == 0
    assert settings.app_name == "Transfer Orders API"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("initial_sequence", "100")
    monkeypatch.setenv("LOG_FORMAT", "json")
    settings = Settings(_env_file=None)
    assert settings.port == 9001
    assert settings.initial_sequence == 100
    assert settings.log_format == "json"


def test_invalid_values_rejected(monkeypatch):
    monkeypatch.setenv("INITIAL_SEQUENCE", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
