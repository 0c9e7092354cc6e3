"""Application settings constants."""

from __future__ import annotations

import logging
import os

# Literal tag every PLS document must start with.
PLS_HEADER = "[playlist]"

# Values reported when a document omits the metadata lines.
DEFAULT_NUMBER_OF_ENTRIES = 0
DEFAULT_PLS_VERSION = 2

# Track length sentinel for "unknown".
DEFAULT_TRACK_LENGTH = -1

# Remote playlist fetches.
HTTP_TIMEOUT_SECONDS = 15.0
HTTP_USER_AGENT = "plsparse/1.0"

DEFAULT_LOG_LEVEL = "INFO"


def http_timeout_seconds() -> float:
    value = (os.environ.get("PLSPARSE_HTTP_TIMEOUT") or "").strip()
    if not value:
        return HTTP_TIMEOUT_SECONDS
    try:
        timeout = float(value)
    except ValueError:
        return HTTP_TIMEOUT_SECONDS
    return timeout if timeout > 0 else HTTP_TIMEOUT_SECONDS


def log_level() -> int:
    value = (os.environ.get("PLSPARSE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(value)
    if isinstance(level, int):
        return level
    return logging.INFO
