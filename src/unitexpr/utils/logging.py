"""JSON Lines logging for parse diagnostics.

Events such as ``operand.prefix_retry`` are emitted through :func:`log_event`
on loggers under the ``unitexpr`` namespace; :func:`configure_json_logger`
decides where they end up.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping
from uuid import uuid4

if TYPE_CHECKING:
    from ..config import Settings

__all__ = [
    "ROOT_LOGGER",
    "JsonLogFormatter",
    "configure_json_logger",
    "configure_from_settings",
    "flush_handlers",
    "log_event",
]

ROOT_LOGGER = "unitexpr"


def _utc_timestamp(created: float) -> str:
    stamp = datetime.fromtimestamp(created, tz=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, event and fields."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": _utc_timestamp(record.created),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": getattr(record, "event", None) or message,
            "message": message,
        }
        if getattr(record, "trace_id", None):
            payload["trace_id"] = record.trace_id
        fields = getattr(record, "extra_fields", None)
        if isinstance(fields, Mapping):
            payload.update(fields)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_json_logger(log_path: Path | None, level: int = logging.INFO) -> logging.Logger:
    """Route the ``unitexpr`` logger to ``log_path`` as JSON lines.

    Previous handlers are closed and replaced. Without ``log_path`` a
    :class:`logging.NullHandler` keeps the library silent.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_path is None:
        handler = logging.NullHandler()
    else:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())

    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def configure_from_settings(settings: "Settings", log_path: Path | None = None) -> logging.Logger:
    """Configure logging from :class:`~unitexpr.config.Settings`.

    An explicit ``log_path`` wins over the configured one and turns on
    debug output, so prefix retries show up in the file.
    """

    if log_path is not None:
        return configure_json_logger(log_path, level=logging.DEBUG)
    return configure_json_logger(settings.log_path, level=settings.log_level)


def flush_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    message: str | None = None,
    **fields: Any,
) -> str:
    """Emit a structured event on ``logger`` and return its trace id.

    Pass the returned id back as ``trace_id`` to correlate later events.
    """

    event_trace_id = trace_id or uuid4().hex
    logger.log(
        level,
        message or event,
        extra={"trace_id": event_trace_id, "event": event, "extra_fields": fields},
    )
    return event_trace_id
