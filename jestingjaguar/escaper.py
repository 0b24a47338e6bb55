"""Escaping of template delimiters so they are emitted literally."""

from __future__ import annotations

import re
import sys

from jestingjaguar import logger
from jestingjaguar.logger import LogLevel

_ESCAPED_OPEN = '{{"{{"}}'
_ESCAPED_CLOSE = '{{"}}"}}'

_ALREADY_ESCAPED = re.compile(r'\{\{"\{\{"\}\}.*?\{\{"\}\}"\}\}')
_DELIMITED = re.compile(r"\{\{([^}]*)\}\}")


def _log_detail(message: str, *args: object) -> None:
    """Write a most-detailed message to stderr when verbosity allows it."""
    if logger.current_level() >= LogLevel.TRACE:
        text = message % args if args else message
        sys.stderr.write(f"TRACE: {text}\n")


class TemplateEscaper:
    """Rewrites ``{{ x }}`` as ``{{"{{"}} x {{"}}"}}``, leaving escaped text alone."""

    def escape(self, content: str) -> tuple[str, int]:
        """Return the escaped content and the number of delimiters escaped."""
        replacements: dict[str, str] = {}
        for index, match in enumerate(_ALREADY_ESCAPED.findall(content)):
            placeholder = f"___ESCAPED_PLACEHOLDER_{chr(index)}___"
            replacements[placeholder] = match
            content = content.replace(match, placeholder, 1)
            _log_detail("Temporarily replaced already escaped pattern: %s", match)

        count = 0

        def _substitute(match: re.Match[str]) -> str:
            nonlocal count
            count += 1
            _log_detail("Escaping: %s", match.group(0))
            return f"{_ESCAPED_OPEN}{match.group(1)}{_ESCAPED_CLOSE}"

        result = _DELIMITED.sub(_substitute, content)

        for placeholder, original in replacements.items():
            result = result.replace(placeholder, original, 1)
            _log_detail("Restored placeholder: %s", placeholder)

        return result, count