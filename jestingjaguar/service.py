"""Escaping across a single file or a whole directory tree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, Protocol

from jestingjaguar import logger
from jestingjaguar.processor import FileProcessor


class _FileProcessor(Protocol):
    def process_file(self, file_path: str) -> int: ...


@dataclass
class Stats:
    """Totals gathered while escaping."""

    files_processed: int = 0
    escapes_performed: int = 0


def _walk_files(root: str) -> Iterator[str]:
    """Yield every non-directory path below ``root`` in lexical order."""
    with os.scandir(root) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(entry.path)
        else:
            yield entry.path


class Service:
    """Escapes template delimiters in a file or, recursively, a directory."""

    def __init__(self, processor: _FileProcessor | None = None) -> None:
        self.processor: _FileProcessor = (
            processor if processor is not None else FileProcessor()
        )

    def process(self, path: str | os.PathLike[str]) -> Stats:
        """Process ``path`` and return the totals; raises ``OSError`` on failure."""
        path = os.fspath(path)
        if os.path.isdir(path):
            return self._process_directory(path)
        os.stat(path)

        escapes = self.processor.process_file(path)
        return Stats(files_processed=1, escapes_performed=escapes)

    def _process_directory(self, dir_path: str) -> Stats:
        stats = Stats()
        for file_path in _walk_files(dir_path):
            logger.debug("Processing file: %s", file_path)
            try:
                escapes = self.processor.process_file(file_path)
            except OSError as exc:
                logger.error("Error processing file %s: %s", file_path, exc)
                raise
            stats.files_processed += 1
            stats.escapes_performed += escapes
        return stats