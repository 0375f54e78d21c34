"""
ruled-table: Print tabular data as bordered fixed-width text tables.

This library provides:
- Column widths fitted to content, bounded by a min/max width
- Cells that wrap onto extra lines when wider than their column
- Left, right or center alignment with configurable padding
- Configurable (or blanked) corner, row and column border characters
- Printing of dataclass or dict records through pluggable extractors

Example:
    from ruled_table import TablePrinterBuilder

    printer = TablePrinterBuilder().min_column_width(5).column_padding(1).build()
    printer.print_table(["Name", "Age"], [["Alice", "30"]])

    +-------+-------+
    | Name  | Age   |
    +-------+-------+
    | Alice | 30    |
    +-------+-------+
"""

from importlib.metadata import PackageNotFoundError, version

from .builder import TablePrinterBuilder
from .exceptions import (
    ConfigurationError,
    ExtractionError,
    RuledTableError,
    ValidationError,
)
from .extract import RecordExtractor, column, field_extractor, mapping_extractor
from .models import BLANK, Align, TableConfig
from .printer import TablePrinter
from .sizing import compute_widths

try:
    __version__ = version("ruled-table")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "TablePrinter",
    "TablePrinterBuilder",
    # Models
    "Align",
    "BLANK",
    "TableConfig",
    # Sizing
    "compute_widths",
    # Extraction
    "RecordExtractor",
    "column",
    "field_extractor",
    "mapping_extractor",
    # Exceptions
    "RuledTableError",
    "ConfigurationError",
    "ValidationError",
    "ExtractionError",
]
