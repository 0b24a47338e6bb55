"""Command line entry point for escaping template delimiters."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml

from jestingjaguar import logger
from jestingjaguar.service import Service

_CONFIG_NAME = ".jestingjaguar.yaml"

_DESCRIPTION = """\
A tool to escape template brackets to prevent interpolation.

For example:
  artifacts/{{ workflow.name }}
becomes:
  artifacts/{{"{{"}} workflow.name {{"}}"}}"""

_ESCAPE_DESCRIPTION = """\
Escape template delimiters to prevent interpolation.
If a directory is provided, it will recursively escape all files within it."""


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def load_config(config_file: str | os.PathLike[str] | None = None) -> dict[str, Any]:
    """Read the YAML configuration, returning an empty mapping if none is usable.

    Without an explicit file, ``~/.jestingjaguar.yaml`` is tried.
    """
    path = Path(config_file) if config_file else Path.home() / _CONFIG_NAME
    try:
        with open(path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError):
        return {}
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return {}
    logger.debug("Using config file: %s", path)
    return data


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="jestingjaguar",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        default="",
        help="config file (default is $HOME/.jestingjaguar.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase verbosity (can be used multiple times)",
    )
    commands = parser.add_subparsers(dest="command")
    escape = commands.add_parser(
        "escape",
        help="Escape template delimiters",
        description=_ESCAPE_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    escape.add_argument("path", metavar="file or directory")
    return parser


def _run_escape(path: str) -> None:
    stats = Service().process(path)
    logger.info(
        "Processed %d files, performed %d escapes",
        stats.files_processed,
        stats.escapes_performed,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        parser.print_usage(sys.stderr)
        return 1

    load_config(args.config or None)
    logger.set_verbosity(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        _run_escape(args.path)
    except OSError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())