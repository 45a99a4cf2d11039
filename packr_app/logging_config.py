"""Structured logging helpers for the packing engine."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else on a record came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

# Raw caller data that may describe a person's belongings or plans.
_REDACT_KEYS = frozenset({"input", "brand", "name", "notes", "cultural_notes", "description"})
_REDACTED = "[redacted]"


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object, extras included."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", message),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}
        for key, value in redact_for_log(extras).items():
            payload.setdefault(key, value)
        return json.dumps(payload)


def configure_logging(level: int | str | None = None) -> None:
    """Send everything through one JSON stream handler on the root logger."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def redact_for_log(payload: Any) -> Any:
    """Mask wardrobe and trip free text; keep counts, ids and enum values."""

    if isinstance(payload, dict):
        return {
            key: _REDACTED if key in _REDACT_KEYS else redact_for_log(value) for key, value in payload.items()
        }
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(value) for value in payload]
    if payload is None or isinstance(payload, (str, int, float, bool)):
        return payload
    return str(payload)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring JSON output if nothing else has."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the duration of the block.

    Without an explicit id the enclosing block's id is reused; at the top level
    a fresh one is generated. The previous value is restored on exit.
    """

    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit a structured record; ``fields`` are redacted before they reach handlers."""

    correlation_id = fields.pop("correlation_id", None) or CORRELATION_ID.get()
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "get_logger",
    "log_event",
    "redact_for_log",
]
