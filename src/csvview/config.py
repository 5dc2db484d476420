"""
Configuration and global constants for csvview.

Layout constants size the columns and the enclosing view; logging settings are
read from the environment so the command line stays a single argument.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

APP_TITLE = "csvView"
ROWID_LABEL = "rowid"
# Shown in place of cells that short rows do not have.
NULL_TEXT = "<NULL>"

# Column widths inside the table widget.
COLUMN_HEADER_PADDING = 4

# Minimum size of the view that encloses the table widget.
VIEWPORT_CELL_PADDING = 2
VIEWPORT_HEADER_PADDING = 2 + COLUMN_HEADER_PADDING
VIEWPORT_EXTRA_ROWS = 4

LOG_LEVEL_ENV_VAR = "CSVVIEW_LOG_LEVEL"
LOG_FILE_ENV_VAR = "CSVVIEW_LOG_FILE"
DEFAULT_LOG_LEVEL = logging.WARNING


def determine_log_level() -> int:
    """Resolve the log level from ``CSVVIEW_LOG_LEVEL``, falling back to WARNING."""
    override = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not override:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(override.strip().upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


def determine_log_file() -> Optional[Path]:
    override = os.environ.get(LOG_FILE_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return None
