"""Logging initialization."""

from __future__ import annotations

import os
import logging

from streamscribe.config.logging import LOG_LEVEL, LOG_FORMAT

# Per-request INFO lines from the HTTP client drown out session logs.
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging() -> None:
    if (os.getenv("SHOW_HTTP_LOGS") or "").strip().lower() not in {"1", "true", "yes"}:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
