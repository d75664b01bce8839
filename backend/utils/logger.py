"""Process-wide logging setup shared by the API and the Streamlit page."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from backend.utils.config import get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# HTTP client and server access logs drown out view model build messages.
QUIETED_LOGGERS: tuple[str, ...] = ("urllib3", "uvicorn.access", "watchdog")

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Install the stdout handler once; later calls are no-ops.

    Third-party loggers in ``QUIETED_LOGGERS`` are held at WARNING unless the
    resolved level is DEBUG.
    """

    global _configured
    if _configured:
        return

    resolved_level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, stream=sys.stdout)

    if resolved_level != "DEBUG":
        for name in QUIETED_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
