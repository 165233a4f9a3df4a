"""Logging setup for the wikimd CLI."""

from __future__ import annotations

import json
import logging
import sys

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def level_from_name(name: str) -> int:
    return _LEVELS.get(name.lower(), logging.INFO)


def setup_logging(level: str | int = "info", fmt: str = "text") -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Level name from the config (debug, info, warn, error) or a
            logging level number
        fmt: ``text`` or ``json``
    """
    if isinstance(level, str):
        level = level_from_name(level)

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logging.basicConfig(level=level, handlers=[handler], force=True)

    # Python-Markdown logs extension loading at debug
    logging.getLogger("MARKDOWN").setLevel(logging.WARNING)
