"""Logging setup for retrycase loggers.

All loggers live under the "retrycase" namespace (retrycase.retry,
retrycase.diagnostics). configure_logging attaches a single handler to that
namespace using LoggingSettings; calling it again replaces the handler.

Example:
    >>> from retrycase.runtime.observability import configure_logging
    >>> configure_logging()                       # from RETRYCASE_LOG_* env
    >>> configure_logging(LoggingSettings(level="DEBUG", format="json"))
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

from retrycase.foundation.config import LoggingSettings, get_settings
from retrycase.foundation.errors import JsonDict

ROOT_LOGGER = "retrycase"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Handler installed by configure_logging, tracked so reconfiguring replaces it
_handler: logging.Handler | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: JsonDict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the retrycase logger namespace.

    Args:
        settings: Logging settings (defaults to get_settings().logging)
        stream: Output stream (defaults to stderr)

    Returns:
        The configured "retrycase" logger
    """
    global _handler
    settings = settings or get_settings().logging
    root = logging.getLogger(ROOT_LOGGER)

    if _handler is not None:
        root.removeHandler(_handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if settings.format == "json" else logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(settings.level)
    _handler = handler
    return root


def reset_logging() -> None:
    """Remove the handler installed by configure_logging."""
    global _handler
    if _handler is not None:
        logging.getLogger(ROOT_LOGGER).removeHandler(_handler)
        _handler = None
