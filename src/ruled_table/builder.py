"""Builder pattern for TablePrinter construction.

Configuration is done via fluent method chaining; each method validates its
argument immediately, exactly like the matching ``TablePrinter`` setter.

Example:
    printer = (
        TablePrinterBuilder()
        .align("center")
        .max_column_width(24)
        .min_column_width(4)
        .column_padding(1)
        .disable_corner_marker()
        .build()
    )
    printer.print_table(["Name", "Age"], [["Alice", "30"]])
"""

from typing import TYPE_CHECKING, TextIO

from .printer import TablePrinter

if TYPE_CHECKING:
    from .models import Align, TableConfig


class TablePrinterBuilder:
    """Fluent builder for a configured TablePrinter.

    All configuration methods return ``self`` for chaining. Call ``build()``
    to get the printer. A ``min_column_width`` above the current max lifts
    the max with it; a ``max_column_width`` below the current min fails.
    """

    def __init__(self) -> None:
        self._printer = TablePrinter()

    def build(self) -> TablePrinter:
        """Return the configured printer."""
        return self._printer

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def output(self, out: TextIO) -> "TablePrinterBuilder":
        """Set the text stream to print to (default: ``sys.stdout``)."""
        self._printer.set_output(out)
        return self

    def config(self, config: "TableConfig") -> "TablePrinterBuilder":
        """Replace the whole configuration."""
        self._printer.set_config(config)
        return self

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def align(self, align: "Align | str") -> "TablePrinterBuilder":
        """Set cell alignment (``Align`` member, name, or 'l'/'r'/'c')."""
        self._printer.set_align(align)
        return self

    def min_column_width(self, width: int) -> "TablePrinterBuilder":
        """Set the minimum column width (default: 8)."""
        self._printer.set_min_column_width(width)
        return self

    def max_column_width(self, width: int) -> "TablePrinterBuilder":
        """Set the maximum column width (default: 16)."""
        self._printer.set_max_column_width(width)
        return self

    def column_padding(self, spaces: int) -> "TablePrinterBuilder":
        """Set spaces on each side of cell content (default: 2)."""
        self._printer.set_column_padding(spaces)
        return self

    # -------------------------------------------------------------------------
    # Borders
    # -------------------------------------------------------------------------

    def corner_marker(self, char: str) -> "TablePrinterBuilder":
        """Set the corner marker (default: '+')."""
        self._printer.set_corner_marker(char)
        return self

    def row_separator(self, char: str) -> "TablePrinterBuilder":
        """Set the horizontal border character (default: '-')."""
        self._printer.set_row_separator(char)
        return self

    def column_separator(self, char: str) -> "TablePrinterBuilder":
        """Set the vertical border character (default: '|')."""
        self._printer.set_column_separator(char)
        return self

    def disable_separators(self) -> "TablePrinterBuilder":
        self._printer.disable_separators()
        return self

    def disable_corner_marker(self) -> "TablePrinterBuilder":
        self._printer.disable_corner_marker()
        return self

    def disable_row_separator(self) -> "TablePrinterBuilder":
        self._printer.disable_row_separator()
        return self

    def disable_column_separator(self) -> "TablePrinterBuilder":
        self._printer.disable_column_separator()
        return self
