"""Regression tests for runtime settings validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from app.config import AppSettings, SettingsLoadError, config_load_settings


def test_config_settings_defaults_match_service_defaults() -> None:
    """Expose default metadata and port for a bare configuration."""

    settings = AppSettings(_env_file=None)

    assert settings.application_name == "infoline-api"
    assert settings.app_version == "1.0.0"
    assert settings.application_port == 8080
    assert settings.debug_slow_default_delay_ms == 2000


@pytest.mark.parametrize(
    ("environment_name", "expected"),
    [("dev", True), ("staging", True), ("prod", False), ("Production", False)],
)
def test_config_debug_endpoints_follow_environment_when_unset(environment_name: str, expected: bool) -> None:
    """Enable debug routes outside production when no explicit toggle is set."""

    settings = AppSettings(environment_name=environment_name, debug_endpoints_enabled=None)

    assert settings.config_debug_endpoints_active() is expected


def test_config_debug_endpoints_explicit_toggle_wins() -> None:
    """Honor explicit debug toggle regardless of environment."""

    assert AppSettings(environment_name="prod", debug_endpoints_enabled=True).config_debug_endpoints_active()
    assert not AppSettings(environment_name="dev", debug_endpoints_enabled=False).config_debug_endpoints_active()


def test_config_settings_normalizes_log_level() -> None:
    """Accept case-insensitive log level names."""

    assert AppSettings(log_level=" debug ").log_level == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [
        {"application_name": "   "},
        {"log_level": "verbose"},
        {"application_port": 0},
        {"debug_slow_default_delay_ms": 5000, "debug_slow_max_delay_ms": 1000},
    ],
)
def test_config_settings_rejects_invalid_values(overrides: dict) -> None:
    """Reject blank metadata, unknown log levels, bad ports, and inverted delay bounds."""

    with pytest.raises(ValidationError):
        AppSettings(**overrides)


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError when environment values fail validation."""

    monkeypatch.setenv("APPLICATION_PORT", "not-a-port")

    with pytest.raises(SettingsLoadError):
        config_load_settings()


def test_config_settings_reads_application_description_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read the info payload description from `APPLICATION_DESCRIPTION`."""

    monkeypatch.setenv("APPLICATION_DESCRIPTION", "Sports tech news API")

    assert config_load_settings().application_description == "Sports tech news API"


def test_config_env_example_documents_every_setting() -> None:
    """Keep `.env.example` in sync with every configurable field."""

    env_example_path = Path(__file__).resolve().parent.parent / ".env.example"
    documented_names = {
        line.lstrip("# ").split("=", 1)[0].strip().lower()
        for line in env_example_path.read_text(encoding="utf-8").splitlines()
        if "=" in line
    }

    assert set(AppSettings.model_fields) <= documented_names
