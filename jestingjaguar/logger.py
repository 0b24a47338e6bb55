"""Minimal levelled logging to standard error, driven by a verbosity count."""

from __future__ import annotations

import sys
from enum import IntEnum


class LogLevel(IntEnum):
    """Verbosity levels, from least to most detailed."""

    ERROR = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3

    @property
    def prefix(self) -> str:
        return f"{self.name}: "


_current_level: LogLevel = LogLevel.ERROR


def set_verbosity(verbose: int) -> None:
    """Set the active level from the number of ``-v`` flags given."""
    global _current_level
    if verbose <= 0:
        _current_level = LogLevel.ERROR
    elif verbose == 1:
        _current_level = LogLevel.INFO
    elif verbose == 2:
        _current_level = LogLevel.DEBUG
    else:
        _current_level = LogLevel.TRACE


def current_level() -> LogLevel:
    """Return the active log level."""
    return _current_level


def _log(level: LogLevel, message: str, args: tuple[object, ...]) -> None:
    if level > _current_level:
        return
    text = message % args if args else message
    sys.stderr.write(f"{level.prefix}{text}\n")
    sys.stderr.flush()


def error(message: str, *args: object) -> None:
    """Log an error message."""
    _log(LogLevel.ERROR, message, args)


def info(message: str, *args: object) -> None:
    """Log an informational message."""
    _log(LogLevel.INFO, message, args)


def debug(message: str, *args: object) -> None:
    """Log a debugging message."""
    _log(LogLevel.DEBUG, message, args)


def trace(message: str, *args: object) -> None:
    """Log the most detailed kind of message."""
    _log(LogLevel.TRACE, message, args)