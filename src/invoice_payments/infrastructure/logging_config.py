"""Logging setup for the invoice_payments logger hierarchy.

Modules log through ``logging.getLogger(__name__)``; nothing is emitted
until the host calls configure_logging() or configures logging itself.
"""

from __future__ import annotations

import json
import logging
import sys
import threading
from datetime import UTC, datetime
from typing import IO, Any

LOGGER_NAME = "invoice_payments"

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_STDLIB_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "taskName"}


class JsonFormatter(logging.Formatter):
    """Formats each log record as a single JSON line.

    Fields passed through ``extra=`` are merged into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, val in vars(record).items():
            if key not in _STDLIB_KEYS and key not in payload:
                payload[key] = val

        if record.exc_info and record.exc_info[1] is not None:
            payload["exc_type"] = type(record.exc_info[1]).__name__
            payload["exc_message"] = str(record.exc_info[1])
            payload["traceback"] = self.formatException(record.exc_info)

        # Decimal amounts and references serialize as strings
        return json.dumps(payload, default=str)


_configured = False
_lock = threading.Lock()


def configure_logging(
    level: str | int = logging.INFO,
    fmt: str = "text",
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a stream handler to the invoice_payments logger (idempotent).

    Args:
        level: Level name ("DEBUG", "INFO", ...) or number.
        fmt: "text" for human-readable lines, "json" for one JSON object per line.
        stream: Destination stream. Defaults to stderr.

    Returns:
        The configured package logger.
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAME)

    with _lock:
        if _configured:
            return logger
        _configured = True

        handler = logging.StreamHandler(stream or sys.stderr)
        if fmt == "json":
            handler.setFormatter(JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter(TEXT_FORMAT))

        logger.setLevel(level)
        logger.propagate = False
        logger.addHandler(handler)

    return logger


def reset_logging() -> None:
    """Remove handlers installed by configure_logging(). FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
