"""Read-only document model: an ordered list of rows."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from .row import Row

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """Split file content into lines.

    Lines end at '\\n'; a '\\r' before it is dropped and a trailing
    newline does not start another line.
    """
    if not content:
        return []
    lines = content.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


class Document:
    """Rows of text addressed by 0-based line index."""

    def __init__(self, rows: Optional[Iterable[Row]] = None, file_name: Optional[str] = None):
        self._rows: tuple[Row, ...] = tuple(rows or ())
        self.file_name = file_name

    @classmethod
    def from_lines(cls, lines: Iterable[str], file_name: Optional[str] = None) -> Document:
        """Build a document with one row per line, in order."""
        return cls((Row.from_text(line) for line in lines), file_name=file_name)

    @classmethod
    def open(cls, path: str | os.PathLike) -> Document:
        """Load a UTF-8 text file.

        Raises:
            OSError: the file cannot be read.
            UnicodeDecodeError: the file is not valid UTF-8.
        """
        with open(path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
        document = cls.from_lines(split_lines(content), file_name=os.fspath(path))
        logger.debug("Loaded %s (%d lines)", document.file_name, document.line_count())
        return document

    def row_at(self, index: int) -> Optional[Row]:
        """Return the row at index, or None past either end of the document."""
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def line_count(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def __len__(self) -> int:
        return len(self._rows)
