"""
Tabular data model for csvview.

A Table is a header Row plus an ordered list of data Rows. Each Row holds the
trimmed Cells of one input line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from rich.cells import cell_len

DELIMITER = ","
UNASSIGNED_ROW_ID = -1

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    """A single trimmed text value."""

    value: str

    @classmethod
    def from_string(cls, text: str) -> "Cell":
        return cls(value=text.strip())

    def __len__(self) -> int:
        # Terminal cell width, the same metric the layout engine uses.
        return cell_len(self.value)

    def set_value(self, text: str) -> None:
        """Replace the cell text."""
        self.value = text


@dataclass
class Row:
    """Ordered cells of one input line plus the row's sequential identity."""

    cells: List[Cell] = field(default_factory=list)
    row_id: int = UNASSIGNED_ROW_ID

    @classmethod
    def from_line(cls, line: str) -> "Row":
        """
        Build a row by splitting ``line`` on every delimiter.

        There is no quoting support: consecutive delimiters produce an empty
        cell, and a line without delimiters produces a single cell. Blank
        lines are not filtered here.
        """
        logger.debug("Row.from_line: %s", line.strip())
        row = cls()
        for term in line.split(DELIMITER):
            row.add_cell(Cell.from_string(term))
        return row

    def num_cols(self) -> int:
        return len(self.cells)

    def rowid_str(self) -> str:
        return str(self.row_id)

    def to_strings(self) -> List[str]:
        return [cell.value for cell in self.cells]

    def add_cell(self, cell: Cell) -> None:
        self.cells.append(cell)

    def cell_width(self, c: int) -> int:
        """Width of cell ``c``, or 0 when the row is too short."""
        if c < len(self.cells):
            return len(self.cells[c])
        return 0

    def try_get(self, c: int, missing: str) -> str:
        """Return the text of cell ``c``, or ``missing`` for short rows."""
        if 0 <= c < len(self.cells):
            return self.cells[c].value
        return missing


@dataclass
class Table:
    """
    The parsed dataset.

    ``num_cols`` is the running maximum of column counts over the header and
    every row added so far; it is only final once loading has finished, which
    is when :meth:`fix_header_names` must be called.
    """

    header: Row
    rows: List[Row] = field(default_factory=list)
    num_cols: int = 0

    def __post_init__(self) -> None:
        self.num_cols = max(self.num_cols, self.header.num_cols())

    def num_rows(self) -> int:
        return len(self.rows)

    def header_names(self) -> List[str]:
        return self.header.to_strings()

    def add_row(self, row: Row) -> None:
        """Append ``row``, assigning it the next sequential row id."""
        if row.row_id != UNASSIGNED_ROW_ID:
            raise ValueError(f"row already inserted with id {row.row_id}")
        self.num_cols = max(self.num_cols, row.num_cols())
        row.row_id = len(self.rows)
        self.rows.append(row)

    def fix_header_names(self) -> None:
        """Name empty header cells and pad the header out to ``num_cols``."""
        for c, cell in enumerate(self.header.cells):
            if len(cell.value) == 0:
                cell.set_value(f"col:{c}")
        for c in range(self.header.num_cols(), self.num_cols):
            self.header.add_cell(Cell.from_string(f"col:{c}"))
        if self.header.num_cols() != self.num_cols:
            raise ValueError(
                f"header has {self.header.num_cols()} columns, expected {self.num_cols}"
            )
