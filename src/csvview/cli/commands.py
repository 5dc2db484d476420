"""
Command-line interface for csvview.

Loads the requested file and hands the table to the interactive viewer.
"""

from __future__ import annotations

import logging
import os
import sys

import click

from .. import __version__
from ..config import determine_log_file, determine_log_level
from ..core.models import Table
from ..core.parser import FileAccessError, from_filepath, from_stream
from ..logging_config import setup_logging
from .viewer import CsvViewApp

STDIN_PATH = "-"
TTY_PATH = "/dev/tty"

logger = logging.getLogger(__name__)


def _reattach_terminal() -> None:
    """Point stdin back at the controlling terminal after reading piped input."""
    if sys.stdin is not None and sys.stdin.isatty():
        return
    try:
        tty_fd = os.open(TTY_PATH, os.O_RDONLY)
    except OSError as exc:
        raise click.ClickException(f"could not open terminal for input: {exc}") from exc
    try:
        os.dup2(tty_fd, 0)
    finally:
        os.close(tty_fd)


def load_table(filepath: str) -> Table:
    """Load ``filepath``, reading standard input when it is ``-``."""
    if filepath == STDIN_PATH:
        table = from_stream(click.get_text_stream("stdin"))
        _reattach_terminal()
        return table
    return from_filepath(filepath)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", message="%(version)s")
@click.argument("file", type=click.Path(allow_dash=True))
def main(file):
    """View a csv file in a table. Use '-' for FILE to read from STDIN."""
    setup_logging(determine_log_level(), determine_log_file())

    try:
        table = load_table(file)
    except FileAccessError as exc:
        logger.debug("load failed: %r", exc.why)
        raise click.ClickException(str(exc)) from exc

    CsvViewApp(table).run()


if __name__ == "__main__":
    main()
