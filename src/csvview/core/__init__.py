"""Core data models and parsing functionality."""

from .models import Cell, Row, Table
from .parser import CsvViewError, FileAccessError, from_filepath, from_stream

__all__ = [
    "Cell",
    "Row",
    "Table",
    "CsvViewError",
    "FileAccessError",
    "from_filepath",
    "from_stream",
]
