"""Layout and view services for csvview."""

from .layout import (
    column_width,
    display_width,
    header_cell_length,
    rowid_display_width,
    rowid_width,
    total_width,
    viewport_size,
)
from .view_adapter import (
    Align,
    ColumnId,
    ColumnKind,
    ColumnSpec,
    build_columns,
    compare,
    field_value,
    sort_rows,
)

__all__ = [
    "column_width",
    "display_width",
    "header_cell_length",
    "rowid_display_width",
    "rowid_width",
    "total_width",
    "viewport_size",
    "Align",
    "ColumnId",
    "ColumnKind",
    "ColumnSpec",
    "build_columns",
    "compare",
    "field_value",
    "sort_rows",
]
