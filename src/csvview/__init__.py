"""
csvview - Terminal viewer for comma-delimited text files.

Loads a delimited file into an in-memory table and shows it as a scrollable,
sortable grid.
"""

__version__ = "0.1.0"

# Import main components for easy access
from .core.models import Cell, Row, Table
from .core.parser import CsvViewError, FileAccessError, from_filepath, from_stream
from .services.layout import column_width, display_width, total_width, viewport_size
from .services.view_adapter import ColumnId, ColumnKind, compare, field_value, sort_rows

__all__ = [
    "Cell",
    "Row",
    "Table",
    "CsvViewError",
    "FileAccessError",
    "from_filepath",
    "from_stream",
    "column_width",
    "display_width",
    "total_width",
    "viewport_size",
    "ColumnId",
    "ColumnKind",
    "compare",
    "field_value",
    "sort_rows",
]
