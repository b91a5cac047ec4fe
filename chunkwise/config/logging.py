"""
Logging for the chunkwise package. A single stdout handler sits on the package
logger, and fields passed with ``extra=`` are rendered as key=value pairs after
the message, e.g. ``... | Created a chunk longer than chunk_size | index=2 length=30 limit=10``.
"""

import logging
import sys
from typing import Any

from chunkwise.config.settings import get_settings

PACKAGE_LOGGER = "chunkwise"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_HANDLER_NAME = "chunkwise-stdout"
# Attributes every LogRecord carries; anything else arrived through extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {"message", "asctime"}


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends extra= fields, sorted by key, to the formatted message."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        fields = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not fields:
            return line
        return f"{line} | " + " ".join(f"{key}={value}" for key, value in sorted(fields.items()))


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach the stdout handler to the package logger (once) and set its level.

    Level defaults to settings.log_level; unknown names fall back to INFO. Safe to
    call repeatedly, e.g. on every app startup in tests.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(h.get_name() == _HANDLER_NAME for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(ExtraFieldsFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(level)

    # tiktoken pulls encodings over HTTP on first use
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def log_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Build a dict suitable for logger.info(..., **log_extra(...)) for structured fields."""
    return {"extra": extra}
