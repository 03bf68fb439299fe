"""Logging setup for retrycase.

Everything in the package logs through stdlib loggers under the "retrycase"
namespace ("retrycase.retry" for retry notifications). The library never
touches the root logger; applications either route those records themselves
or call configure_logging() once at startup:

    >>> from retrycase import configure_logging
    >>> configure_logging(format="json", level="DEBUG")

Formats:
- text: "12:30:45.120 [warning] retrycase.retry: Retry 1; waiting 250ms ..."
- json: one orjson-encoded object per line, for log aggregation
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import orjson

from retrycase.foundation.config import get_settings

if TYPE_CHECKING:
    from typing import TextIO

ROOT_LOGGER = "retrycase"

# Marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_ATTR = "_retrycase_handler"


class TextFormatter(logging.Formatter):
    """Human-readable line: timestamp [level] logger: message."""

    def __init__(self, show_timestamp: bool = True) -> None:
        super().__init__()
        self.show_timestamp = show_timestamp

    def format(self, record: logging.LogRecord) -> str:
        parts = [_ts_human(record.created)] if self.show_timestamp else []
        parts += [f"[{record.levelname.lower()}]", f"{record.name}:", record.getMessage()]
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def __init__(self, show_timestamp: bool = True) -> None:
        super().__init__()
        self.show_timestamp = show_timestamp

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {}
        if self.show_timestamp:
            entry["timestamp"] = datetime.fromtimestamp(record.created, tz=UTC).isoformat()
        entry |= {"level": record.levelname.lower(), "logger": record.name, "event": record.getMessage()}
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=repr).decode()


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
    show_timestamp: bool | None = None,
) -> logging.Handler:
    """Install a handler on the "retrycase" logger. Unset arguments come from LoggingSettings.

    Calling again replaces the previously installed handler.

    Raises:
        ValueError: If format is not "text" or "json"
    """
    settings = get_settings().logging
    format = format or settings.format
    show_timestamp = settings.include_timestamps if show_timestamp is None else show_timestamp
    match format:
        case "text": formatter: logging.Formatter = TextFormatter(show_timestamp)
        case "json": formatter = JsonFormatter(show_timestamp)
        case _: raise ValueError(f"Unknown format: {format}. Use 'text' or 'json'")

    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)

    root = logging.getLogger(ROOT_LOGGER)
    for old in [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(getattr(logging, (level or settings.level).upper(), logging.INFO))
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the retrycase namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _ts_human(created: float) -> str:
    """HH:MM:SS.mmm in UTC."""
    return datetime.fromtimestamp(created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]
