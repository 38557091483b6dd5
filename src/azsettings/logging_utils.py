"""Logging setup for the ``azsettings`` logger hierarchy.

Library modules only create loggers. Handlers are attached by
``configure_logging``, which the CLI calls; embedding applications keep
control of the root logger.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from azsettings.config import Settings, load_settings

PACKAGE_LOGGER = "azsettings"

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# Set on handlers we own so a second call replaces them instead of stacking.
_OWNED_ATTR = "_azsettings_owned"

_logger = logging.getLogger(__name__)


def _owned(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    setattr(handler, _OWNED_ATTR, True)
    return handler


def _remove_owned_handlers(package_logger: logging.Logger) -> None:
    for handler in list(package_logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            package_logger.removeHandler(handler)
            handler.close()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stderr handler, plus an optional file handler, to ``azsettings``.

    The level from ``AZSETTINGS_LOG_LEVEL`` applies to the package logger
    only. Calling this again replaces the handlers it installed earlier.
    """
    if settings is None:
        settings = load_settings()
    level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_owned_handlers(package_logger)

    package_logger.addHandler(_owned(logging.StreamHandler(sys.stderr)))

    if settings.logging.file:
        try:
            Path(settings.logging.file).parent.mkdir(parents=True, exist_ok=True)
            package_logger.addHandler(_owned(logging.FileHandler(settings.logging.file)))
        except OSError as exc:
            _logger.warning("Failed to open log file %s: %s", settings.logging.file, exc)

    package_logger.setLevel(level)
    return package_logger
