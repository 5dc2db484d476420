"""
Logging Configuration
Sets up the package logger for csvview.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "csvview"


def setup_logging(
    level: int = logging.WARNING, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure the ``csvview`` logger.

    Records go to ``log_file`` when given, otherwise to stderr. The terminal UI
    owns the screen once it starts, so a log file is the way to watch DEBUG
    output while browsing a table.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Reconfiguring replaces handlers instead of stacking duplicates
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)

    logger.debug("Logging initialized.")
    return logger
