"""
Sortable view adapter for csvview.

The table widget only sees column identities, display strings and a
comparison function. It never touches Row or Cell internals and never writes
back to the Table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List, Optional

from rich.cells import cell_len

from ..config import COLUMN_HEADER_PADDING, NULL_TEXT, ROWID_LABEL
from ..core.models import Row, Table
from .layout import display_width, rowid_display_width

ROWID_KEY = "rowid"
POSITION_KEY_PREFIX = "col:"


class ColumnKind(Enum):
    ROW_ID = "rowid"
    POSITION = "position"


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class ColumnId:
    """Either the row-identity pseudo-column or the data column at ``position``."""

    kind: ColumnKind
    position: Optional[int] = None

    @classmethod
    def row_id(cls) -> "ColumnId":
        return cls(ColumnKind.ROW_ID)

    @classmethod
    def at(cls, position: int) -> "ColumnId":
        if position < 0:
            raise ValueError(f"column position must be non-negative: {position}")
        return cls(ColumnKind.POSITION, position)

    @property
    def key(self) -> str:
        """String key used to identify the column inside the widget."""
        if self.kind is ColumnKind.ROW_ID:
            return ROWID_KEY
        return f"{POSITION_KEY_PREFIX}{self.position}"

    @classmethod
    def from_key(cls, key: str) -> "ColumnId":
        if key == ROWID_KEY:
            return cls.row_id()
        if key.startswith(POSITION_KEY_PREFIX):
            try:
                return cls.at(int(key[len(POSITION_KEY_PREFIX):]))
            except ValueError as exc:
                raise ValueError(f"Invalid column key: {key}") from exc
        raise ValueError(f"Invalid column key: {key}")


@dataclass(frozen=True)
class ColumnSpec:
    """Render options for one widget column."""

    column_id: ColumnId
    label: str
    width: int
    align: Align = Align.LEFT


def field_value(row: Row, column: ColumnId) -> str:
    """Display text of ``row`` in ``column``; missing cells show the placeholder."""
    if column.kind is ColumnKind.ROW_ID:
        return row.rowid_str()
    return row.try_get(column.position, NULL_TEXT)


def _cmp(lhs, rhs) -> int:
    return (lhs > rhs) - (lhs < rhs)


def compare(row_a: Row, row_b: Row, column: ColumnId) -> int:
    """
    Order two rows by ``column``, returning -1, 0 or 1.

    Row ids compare numerically. Data cells compare as plain text, even when
    they look numeric; a missing cell compares as the placeholder text.
    """
    if column.kind is ColumnKind.ROW_ID:
        return _cmp(row_a.row_id, row_b.row_id)
    return _cmp(
        row_a.try_get(column.position, NULL_TEXT),
        row_b.try_get(column.position, NULL_TEXT),
    )


def sort_rows(rows: Iterable[Row], column: ColumnId, reverse: bool = False) -> List[Row]:
    """Return ``rows`` sorted by ``column``; ties keep their current order."""
    return sorted(
        rows,
        key=cmp_to_key(lambda a, b: compare(a, b, column)),
        reverse=reverse,
    )


def build_columns(table: Table) -> List[ColumnSpec]:
    """
    Describe the widget columns for ``table``.

    The row-identity column comes first, followed by one column per header
    name. Each data column is wide enough for its widest value, the
    placeholder text and its header label.
    """
    columns = [
        ColumnSpec(
            column_id=ColumnId.row_id(),
            label=ROWID_LABEL,
            width=rowid_display_width(table, COLUMN_HEADER_PADDING),
        )
    ]
    min_cell_width = cell_len(NULL_TEXT)
    for c, header_name in enumerate(table.header_names()):
        columns.append(
            ColumnSpec(
                column_id=ColumnId.at(c),
                label=header_name,
                width=display_width(table, c, min_cell_width, 0, COLUMN_HEADER_PADDING),
            )
        )
    return columns
