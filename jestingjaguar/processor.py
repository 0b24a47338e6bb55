"""Rewriting a single file in place with its template delimiters escaped."""

from __future__ import annotations

import os
import sys
from typing import Protocol

from jestingjaguar import logger
from jestingjaguar.escaper import TemplateEscaper
from jestingjaguar.logger import LogLevel

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _log_detail(message: str, *args: object) -> None:
    """Write a most-detailed message to stderr when verbosity allows it."""
    if logger.current_level() >= LogLevel.TRACE:
        text = message % args if args else message
        sys.stderr.write(f"TRACE: {text}\n")


class _Escaper(Protocol):
    def escape(self, content: str) -> tuple[str, int]: ...


class FileProcessor:
    """Reads a file, escapes its content and writes it back when anything changed."""

    def __init__(self, escaper: _Escaper | None = None) -> None:
        self.escaper: _Escaper = escaper if escaper is not None else TemplateEscaper()

    def process_file(self, file_path: str | os.PathLike[str]) -> int:
        """Escape the file in place and return the number of escapes performed.

        The file is left untouched when no escapes are needed. Errors while
        reading or writing are raised as ``OSError``.
        """
        with open(file_path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
            content = handle.read()

        _log_detail("Original content: %s", content)

        escaped, count = self.escaper.escape(content)
        if count == 0:
            logger.debug("No escapes needed for file: %s", file_path)
            return 0

        _log_detail("Escaped content: %s", escaped)
        logger.debug("Performed %d escapes in file: %s", count, file_path)

        with open(
            file_path, "w", encoding=_ENCODING, errors=_ERRORS, newline=""
        ) as handle:
            handle.write(escaped)

        return count