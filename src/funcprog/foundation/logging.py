"""Logging setup for funcprog.

Library modules log through ``logging.getLogger("funcprog.<area>")`` and never
install handlers on import. Applications (or tests) opt in with
``configure_logging``, which attaches one handler to the ``funcprog`` logger:
human-readable text for development, JSON lines for aggregation.

Quick Start:
    >>> from funcprog.foundation.logging import configure_logging
    >>> configure_logging(format="text", level="DEBUG")
    >>> from_(0).take(3).to_list()
    # => 10:30:45.120 [DEBUG] funcprog.stream materialized stream count=3
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from .config import get_settings

ROOT_LOGGER = "funcprog"

# Attributes every LogRecord carries; anything else came in via `extra=`
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


def _extras(record: logging.LogRecord) -> dict[str, object]:
    return {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}


class TextFormatter(logging.Formatter):
    """Format: timestamp [LEVEL] logger message key=value ..."""

    def __init__(self, *, show_timestamp: bool = True) -> None:
        super().__init__()
        self.show_timestamp = show_timestamp

    def format(self, record: logging.LogRecord) -> str:
        parts = [datetime.fromtimestamp(record.created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]] if self.show_timestamp else []
        parts += [f"[{record.levelname}]", record.name, record.getMessage()]
        parts += [f"{k}={v!r}" for k, v in sorted(_extras(record).items())]
        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def __init__(self, *, show_timestamp: bool = True) -> None:
        super().__init__()
        self.show_timestamp = show_timestamp

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {"level": record.levelname.lower(), "logger": record.name, "event": record.getMessage()}
        if self.show_timestamp:
            payload["timestamp"] = datetime.fromtimestamp(record.created, tz=UTC).isoformat()
        payload.update(_extras(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=repr, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
) -> logging.Handler:
    """Attach a single handler to the funcprog logger. Format: "text", "json". Defaults come from settings."""
    settings = get_settings()
    fmt = format or settings.logging.format
    lvl = (level or settings.effective_log_level).upper()
    ts = settings.logging.include_timestamps
    match fmt:
        case "text": formatter: logging.Formatter = TextFormatter(show_timestamp=ts)
        case "json": formatter = JsonFormatter(show_timestamp=ts)
        case _: raise ValueError(f"Unknown format: {fmt}. Use 'text' or 'json'")

    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(formatter)
    root = logging.getLogger(ROOT_LOGGER)
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(getattr(logging, lvl, logging.WARNING))
    return handler


def get_logger(area: str | None = None) -> logging.Logger:
    """Logger under the funcprog namespace, e.g. get_logger("stream") -> funcprog.stream."""
    return logging.getLogger(f"{ROOT_LOGGER}.{area}" if area else ROOT_LOGGER)
