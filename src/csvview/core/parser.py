"""
CSV loading for csvview.

This module turns a text source into a :class:`~csvview.core.models.Table`.
Any text parses; the only recoverable failure is a path that cannot be opened.
"""

from __future__ import annotations

import logging
from os import PathLike
from typing import Iterable, Union

from .models import Row, Table

logger = logging.getLogger(__name__)

PathType = Union[str, PathLike]


class CsvViewError(Exception):
    """Base class for csvview errors."""


class FileAccessError(CsvViewError):
    """Raised when the requested file cannot be opened."""

    def __init__(self, filepath: PathType, why: OSError) -> None:
        self.filepath = str(filepath)
        self.why = why
        super().__init__(f"could not open '{self.filepath}': {why}")


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def from_stream(stream: Iterable[str]) -> Table:
    """
    Build a table from an iterable of text lines.

    The first line is the header. Remaining lines that are empty once the line
    ending is removed are skipped. Header names are normalized after the last
    line, once the final column count is known.
    """
    lines = iter(stream)
    header_line = next(lines, "")
    table = Table(header=Row.from_line(_strip_line_ending(header_line)))

    for raw_line in lines:
        line = _strip_line_ending(raw_line)
        if len(line) > 0:
            table.add_row(Row.from_line(line))

    table.fix_header_names()
    logger.info("num_rows=%d num_cols=%d", table.num_rows(), table.num_cols)
    return table


def from_filepath(filepath: PathType) -> Table:
    """
    Load a table from ``filepath``.

    Raises
    ------
    FileAccessError
        When the file cannot be opened. Read errors after a successful open
        propagate unchanged.
    """
    try:
        handle = open(filepath, "r", encoding="utf-8")
    except OSError as exc:
        raise FileAccessError(filepath, exc) from exc

    with handle:
        return from_stream(handle)
