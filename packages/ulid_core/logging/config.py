"""Stdout logging setup for applications embedding ULID generators.

Generator modules only call ``get_logger``. The host application installs the
handler, either directly with ``configure_logging`` or from loaded settings
with ``configure_logging_from_settings``. Each record is rendered as one JSON
line or one plain line, with the bound structured context attached.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from . import fields
from .context import bind_context, get_context

if TYPE_CHECKING:
    from packages.ulid_core.config import LoggingSettings


class ContextFilter(logging.Filter):
    """Copy the bound logging context onto each record as ``record.context``."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        record.context = context
        for key, value in context.items():
            setattr(record, key, value)
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line; context keys never shadow the core fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = dict(getattr(record, "context", None) or {})
        payload.update(
            {
                fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
                fields.LEVEL: record.levelname,
                fields.LOGGER: record.name,
                fields.MESSAGE: record.getMessage(),
            }
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Readable UTC lines ending with sorted ``key=value`` context pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        self.converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return message
        suffix = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{message} {suffix}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> logging.Handler:
    """Install a single stdout handler on the root logger and return it.

    Existing root handlers are replaced so repeated calls do not duplicate
    emissions. ``service`` and ``environment`` are bound into the logging
    context so every line carries them.
    """
    level = level.upper()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(**{fields.SERVICE: service or None, fields.ENVIRONMENT: environment or None})
    return handler


def configure_logging_from_settings(settings: LoggingSettings) -> logging.Handler:
    """Configure logging from the ``logging`` section of ``UlidSettings``."""
    return configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
