"""Centralized logging configuration and structured-trace helpers.

Every module logs through ``logging.getLogger(__name__)``. The CLI calls
``configure_logging()`` once; DEBUG traces attach a flat context dict through
``extra=extra_context(...)`` and are rendered after the message.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from constants import Constants

_CONTEXT_ATTR = "jrm_context"


class _ContextFormatter(logging.Formatter):
    """Formatter that appends ``key=value`` pairs from extra_context()."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        ctx = getattr(record, _CONTEXT_ATTR, None)
        if not ctx:
            return base
        pairs = " ".join(f"{k}={v}" for k, v in ctx.items())
        return f"{base} ({pairs})"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> None:
    """Install a single stderr handler on the root logger.

    Safe to call more than once; previously installed handlers are replaced.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_ContextFormatter(Constants.LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def add_file_handler(path: str) -> None:
    """Mirror log output into ``path``."""
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setFormatter(
        _ContextFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
    logging.getLogger().addHandler(file_handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records would be emitted by ``logger``."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Dict[str, Any]]:
    """Build the ``extra=`` mapping for a structured log call.

    None values are dropped so call sites can pass optional fields freely.
    """
    return {_CONTEXT_ATTR: {k: v for k, v in fields.items() if v is not None}}


def safe_url(url: str) -> str:
    """Strip credentials and query strings from a URL before logging it."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return "<invalid-url>"
    netloc = parts.hostname or ""
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit((parts.scheme, netloc, parts.path, "", ""))


class Timer:
    """Context manager measuring elapsed wall time in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
