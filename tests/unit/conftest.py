"""Unit test fixtures."""

import io

import pytest

from ruled_table import TableConfig, TablePrinter


@pytest.fixture
def out() -> io.StringIO:
    """In-memory text stream to capture printed tables."""
    return io.StringIO()


@pytest.fixture
def compact_config() -> TableConfig:
    """Narrow columns and single-space padding for readable golden strings."""
    return TableConfig(min_column_width=5, max_column_width=16, column_padding=1)


@pytest.fixture
def printer(out: io.StringIO, compact_config: TableConfig) -> TablePrinter:
    """Printer writing to the ``out`` fixture with the compact config."""
    return TablePrinter(out, compact_config)
