"""Settings loading and validation."""

import pytest
from pydantic import ValidationError

from storeadmin.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.app_name == "storeadmin"
    assert settings.location_header_name == "X-Location-ID"
    assert settings.relation_default_name_from == "name"
    assert settings.telemetry_enabled is False


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCATION_HEADER_NAME", "X-Branch")
    monkeypatch.setenv("DEBUG", "true")
    settings = Settings(_env_file=None)
    assert settings.location_header_name == "X-Branch"
    assert settings.debug is True


def test_unknown_telemetry_exporter_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, telemetry_exporter="jaeger")


def test_empty_database_url_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="")


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
