"""Tests for settings loading and validation."""

from __future__ import annotations

from dataclasses import replace

import pytest

from backend.utils.config import Settings, load_settings, validate_settings


def test_defaults_when_environment_is_empty() -> None:
    settings = load_settings({})
    assert settings == Settings()


def test_environment_overrides_defaults() -> None:
    settings = load_settings(
        {
            "APP_NAME": "Front Desk",
            "LOG_LEVEL": "debug",
            "CURRENCY_SYMBOL": "£",
            "CURRENCY_CODE": "gbp",
            "DASHBOARD_API_BASE_URL": "http://api.local:9000/",
        }
    )
    assert settings.app_name == "Front Desk"
    assert settings.log_level == "DEBUG"
    assert settings.currency_symbol == "£"
    assert settings.currency_code == "GBP"
    assert settings.api_base_url == "http://api.local:9000"


def test_empty_currency_symbol_raises() -> None:
    with pytest.raises(ValueError):
        load_settings({"CURRENCY_SYMBOL": ""})


@pytest.mark.parametrize("code", ["", "US", "USDX", "U5D"])
def test_malformed_currency_code_raises(code: str) -> None:
    with pytest.raises(ValueError):
        validate_settings(replace(Settings(), currency_code=code))


def test_unknown_log_level_raises() -> None:
    with pytest.raises(ValueError):
        load_settings({"LOG_LEVEL": "chatty"})
