"""Root logger setup for the steam-appinfo command.

The library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are attached here, once, by the CLI. The level comes from
``--debug`` / ``--verbose``, else ``STEAM_APPINFO_LOG_LEVEL``, else WARNING.
"""

from __future__ import annotations

import logging
import sys

# (max level, format, datefmt) checked in order; the first match wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s %(name)s: %(message)s", "%H:%M:%S"),
)
_CONSOLE_DEFAULT = "steam-appinfo: %(message)s"

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _console_formatter(level: int) -> logging.Formatter:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter(_CONSOLE_DEFAULT)


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Send log records to stderr, and to *log_file* when given.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.
    """
    numeric_level = parse_level(level)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_console_formatter(numeric_level))
    handlers.append(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        root.addHandler(handler)
    root.setLevel(numeric_level)


def parse_level(level: str | None) -> int:
    """Level name → logging constant; unknown or empty names mean WARNING."""
    numeric = logging.getLevelName((level or "").upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
