"""
Interactive table viewer for csvview.

Hosts a textual ``DataTable`` that is fed entirely through the view adapter.
Selecting a column header sorts by that column; selecting it again reverses
the order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import DataTable, Footer

from ..config import APP_TITLE
from ..core.models import Row, Table
from ..services.layout import viewport_size
from ..services.view_adapter import ColumnId, ColumnSpec, build_columns, field_value, sort_rows

logger = logging.getLogger(__name__)


class CsvViewApp(App):
    """Full-screen viewer for a loaded table."""

    TITLE = APP_TITLE

    CSS = """
    Screen {
        align: center middle;
    }

    #frame {
        border: round $accent;
        width: auto;
        height: auto;
        max-width: 100%;
        max-height: 100%;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("s", "sort_cursor_column", "Sort column"),
    ]

    def __init__(self, table: Table) -> None:
        super().__init__()
        self._table = table
        self._columns: List[ColumnSpec] = build_columns(table)
        self._rows: List[Row] = list(table.rows)
        self._sort_column: Optional[ColumnId] = None
        self._sort_reverse = False

    @property
    def sort_column(self) -> Optional[ColumnId]:
        return self._sort_column

    @property
    def sort_reverse(self) -> bool:
        return self._sort_reverse

    def compose(self) -> ComposeResult:
        with Container(id="frame"):
            yield DataTable(id="table", zebra_stripes=True, cursor_type="cell")
        yield Footer()

    def on_mount(self) -> None:
        frame = self.query_one("#frame", Container)
        frame.border_title = APP_TITLE

        data_table = self.query_one(DataTable)
        # The data width already includes cell padding; the rowid column does not.
        width, height = viewport_size(self._table)
        rowid_width = self._columns[0].width + 2 * data_table.cell_padding
        data_table.styles.width = width + rowid_width
        data_table.styles.height = height
        data_table.styles.max_width = "100%"
        data_table.styles.max_height = "100%"

        for spec in self._columns:
            data_table.add_column(
                Text(spec.label, justify=spec.align.value),
                width=spec.width,
                key=spec.column_id.key,
            )
        self._populate(data_table, self._rows)
        data_table.focus()

    def _populate(self, data_table: DataTable, rows: Iterable[Row]) -> None:
        data_table.clear()
        for row in rows:
            data_table.add_row(
                *(
                    Text(field_value(row, spec.column_id), justify=spec.align.value)
                    for spec in self._columns
                ),
                key=row.rowid_str(),
            )

    def sort_by(self, column: ColumnId) -> None:
        """Sort ascending by ``column``, or flip the direction if already sorted by it."""
        if column == self._sort_column:
            self._sort_reverse = not self._sort_reverse
        else:
            self._sort_column = column
            self._sort_reverse = False
        logger.debug("sort_by: %s reverse=%s", column.key, self._sort_reverse)
        self._rows = sort_rows(self._rows, column, reverse=self._sort_reverse)
        self._populate(self.query_one(DataTable), self._rows)

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        self.sort_by(ColumnId.from_key(event.column_key.value))

    def action_sort_cursor_column(self) -> None:
        data_table = self.query_one(DataTable)
        if 0 <= data_table.cursor_column < len(self._columns):
            self.sort_by(self._columns[data_table.cursor_column].column_id)
