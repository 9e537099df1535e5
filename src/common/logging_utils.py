"""Centralized logging helpers.

All diagnostics go to stderr: stdout is reserved for the MCP stdio transport
and for README text printed by the CLI.
"""
from __future__ import annotations

import logging
import os
import sys
import time
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from constants import Constants

STDERR_HANDLER_NAME = "pkgreadme-stderr"
_SENSITIVE_PARAMS = {"token", "access_token", "auth", "key", "api_key", "password", "secret"}


def configure_logging() -> None:
    """Attach a single stderr handler to the root logger.

    The level comes from the PKGREADME_LOG_LEVEL environment variable
    (default INFO). Calling this more than once does not duplicate handlers.
    """
    root = logging.getLogger()
    level_name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    for handler in root.handlers:
        if handler.get_name() == STDERR_HANDLER_NAME:
            return
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(STDERR_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    root.addHandler(handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from this logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records, dropping None values."""
    return {key: value for key, value in fields.items() if value is not None}


def redact(value: Optional[str]) -> str:
    """Mask a secret for logging."""
    if not value:
        return ""
    return "[REDACTED]"


def safe_url(url: str) -> str:
    """Strip credentials and sensitive query parameters from a URL for logging."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    netloc = parts.netloc
    if "@" in netloc:
        netloc = "[REDACTED]@" + netloc.rsplit("@", 1)[1]
    query = parts.query
    if query:
        pairs = [
            (k, redact(v) if k.lower() in _SENSITIVE_PARAMS else v)
            for k, v in parse_qsl(query, keep_blank_values=True)
        ]
        query = urlencode(pairs, safe="[]")
    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))


class Timer:
    """Context manager measuring elapsed wall time in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> float:
        """Elapsed milliseconds; still running timers report time so far."""
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000, 2)
