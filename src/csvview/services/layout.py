"""
Column width computation for csvview.

Every function here is pure and recomputes from the table's current state. The
table does not change after loading, so nothing is cached.
"""

from __future__ import annotations

from typing import Tuple

from rich.cells import cell_len

from ..config import (
    NULL_TEXT,
    ROWID_LABEL,
    VIEWPORT_CELL_PADDING,
    VIEWPORT_EXTRA_ROWS,
    VIEWPORT_HEADER_PADDING,
)
from ..core.models import Table


def column_width(table: Table, c: int) -> int:
    """Widest data cell in column ``c``; short rows do not contribute."""
    return max((row.cell_width(c) for row in table.rows), default=0)


def header_cell_length(table: Table, c: int) -> int:
    return table.header.cell_width(c)


def display_width(
    table: Table,
    c: int,
    min_cell_width: int,
    cell_padding: int,
    header_padding: int,
) -> int:
    """
    Width a column needs to show its widest value and its header label.

    The data side is ``max(column_width, min_cell_width) + cell_padding`` and
    the header side is ``header_cell_length + header_padding``; the larger of
    the two wins.
    """
    data_width = max(column_width(table, c), min_cell_width) + cell_padding
    header_width = header_cell_length(table, c) + header_padding
    return max(data_width, header_width)


def total_width(
    table: Table, min_cell_width: int, cell_padding: int, header_padding: int
) -> int:
    """Sum of :func:`display_width` over every data column."""
    return sum(
        display_width(table, c, min_cell_width, cell_padding, header_padding)
        for c in range(table.num_cols)
    )


def rowid_width(table: Table) -> int:
    """Width of the largest row id, which belongs to the last row."""
    if not table.rows:
        return 0
    return cell_len(table.rows[-1].rowid_str())


def rowid_display_width(table: Table, header_padding: int) -> int:
    return max(rowid_width(table), cell_len(ROWID_LABEL) + header_padding)


def viewport_size(table: Table) -> Tuple[int, int]:
    """Minimum (width, height) of the view enclosing the table widget."""
    width = total_width(
        table, cell_len(NULL_TEXT), VIEWPORT_CELL_PADDING, VIEWPORT_HEADER_PADDING
    )
    return width, table.num_rows() + VIEWPORT_EXTRA_ROWS
