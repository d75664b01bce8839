"""Runtime settings for the dashboard service and its Streamlit front end."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional


_CURRENCY_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    app_name: str = "Hotel Operations Dashboard"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    currency_symbol: str = "$"
    currency_code: str = "USD"
    api_base_url: str = "http://127.0.0.1:8000"


def validate_settings(settings: Settings) -> None:
    if not settings.currency_symbol:
        raise ValueError("currency_symbol must not be empty")
    if not _CURRENCY_CODE_PATTERN.match(settings.currency_code):
        raise ValueError("currency_code must be a three-letter uppercase ISO 4217 code")
    if settings.log_level.upper() not in _LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    if env is None:
        env = os.environ
    defaults = Settings()
    settings = Settings(
        app_name=env.get("APP_NAME", defaults.app_name),
        app_version=env.get("APP_VERSION", defaults.app_version),
        log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
        currency_symbol=env.get("CURRENCY_SYMBOL", defaults.currency_symbol),
        currency_code=env.get("CURRENCY_CODE", defaults.currency_code).upper(),
        api_base_url=env.get("DASHBOARD_API_BASE_URL", defaults.api_base_url).rstrip("/"),
    )
    validate_settings(settings)
    logging.getLogger(__name__).debug("Loaded settings for %s", settings.app_name)
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
