"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from csvview.core.parser import from_stream
from csvview.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by the CLI so tests do not write to stale streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_table():
    """Build a table from literal CSV text."""

    def _make(text):
        return from_stream(io.StringIO(text))

    return _make


@pytest.fixture
def sample_csv(tmp_path):
    """Path to a small CSV file with one short row."""
    csv_content = """name, city ,age
alice,Paris,34
bob, Lyon ,9

carol,Nice
"""
    csv_path = tmp_path / "people.csv"
    csv_path.write_text(csv_content, encoding="utf-8")
    return csv_path
