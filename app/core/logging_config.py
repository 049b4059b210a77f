"""Logging setup for the ``app`` logger hierarchy."""
from __future__ import annotations

import logging
import sys
import threading
from typing import Any

LOGGER_NAME = "app"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False
_lock = threading.Lock()


def configure_logging(
    level: int | str = logging.INFO,
    *,
    stream: Any = None,
    handler: logging.Handler | None = None,
) -> None:
    """Attach a handler to the ``app`` logger (idempotent)."""

    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(level)

    h = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(h)


def reset_logging() -> None:
    """Undo :func:`configure_logging`; used by tests."""

    global _configured
    with _lock:
        _configured = False
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
