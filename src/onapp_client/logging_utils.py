"""Logging setup for the ``onapp_client`` logger hierarchy.

Modules log through ``logging.getLogger(__name__)``. Applications that do not
configure logging themselves can ask the client to attach handlers driven by
``LOG_LEVEL`` / ``LOG_FILE``; only the package logger is touched, the root
logger is left to the application.
"""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path

from onapp_client.config import Settings, load_settings

PACKAGE_LOGGER = "onapp_client"

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_configure_lock = threading.Lock()

_logger = logging.getLogger(__name__)


def _owned(handler: logging.Handler) -> bool:
    return getattr(handler, "_onapp_client", False)


def _build_handlers(settings: Settings) -> list[logging.Handler]:
    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    log_file = settings.logging.file
    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))
        except OSError as exc:
            _logger.warning("Failed to open log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._onapp_client = True  # type: ignore[attr-defined]
    return handlers


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach stderr (and optional file) handlers to the package logger.

    Calling it again replaces the handlers installed by a previous call, so a
    client re-created with different settings does not duplicate output.
    """
    settings = settings or load_settings()
    level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    with _configure_lock:
        for handler in [h for h in package_logger.handlers if _owned(h)]:
            package_logger.removeHandler(handler)
            handler.close()
        for handler in _build_handlers(settings):
            package_logger.addHandler(handler)
        package_logger.setLevel(level)
        package_logger.propagate = False

    return package_logger
