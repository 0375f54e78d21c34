"""
Bordered table printer with wrapping cells.

This module provides the TablePrinter class, which writes headers and rows of
string cells to a text stream as a fixed-width table. Cells longer than their
column width wrap onto extra physical lines of the same logical row.

Example output (defaults: left aligned, min width 8, padding 2):
    +------------+------------+
    |  Name      |  Status    |
    +------------+------------+
    |  item-1    |  active    |
    |  item-2    |  paused    |
    +------------+------------+
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from typing import Any, TextIO

from .exceptions import ExtractionError, ValidationError
from .extract import RecordExtractor, field_extractor
from .models import BLANK, Align, TableConfig, validate_border_char, validate_size
from .sizing import compute_widths

logger = logging.getLogger(__name__)

Row = Sequence[Any]


class TablePrinter:
    """Print tabular data as a bordered, fixed-width text table.

    Configuration is held as a frozen ``TableConfig``. Every setter validates
    its argument immediately and swaps in a new config, so a misconfigured
    printer never reaches a print call. A printer must not be reconfigured
    while another thread is printing with it.
    """

    def __init__(self, out: TextIO | None = None, config: TableConfig | None = None) -> None:
        """Initialize the printer.

        Args:
            out: Text stream to write to. Defaults to ``sys.stdout``,
                looked up at print time.
            config: Rendering configuration. Defaults to ``TableConfig()``.
        """
        self._out = out
        self._config = config if config is not None else TableConfig()

    @property
    def config(self) -> TableConfig:
        """The current rendering configuration."""
        return self._config

    @property
    def out(self) -> TextIO:
        """The stream the next print call writes to."""
        return self._out if self._out is not None else sys.stdout

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_config(self, config: TableConfig) -> None:
        if not isinstance(config, TableConfig):
            raise ValidationError("config", config, "A TableConfig is required")
        self._config = config

    def set_output(self, out: TextIO) -> None:
        if out is None:
            raise ValidationError("out", out, "A non-null output stream is required")
        self._out = out

    def set_align(self, align: Align | str) -> None:
        if align is None:
            raise ValidationError("align", align, "A non-null align is required")
        self._config = replace(self._config, align=Align.parse(align))

    def set_corner_marker(self, corner_marker: str) -> None:
        validate_border_char("corner_marker", corner_marker)
        self._config = replace(self._config, corner_marker=corner_marker)

    def set_row_separator(self, row_separator: str) -> None:
        validate_border_char("row_separator", row_separator)
        self._config = replace(self._config, row_separator=row_separator)

    def set_column_separator(self, column_separator: str) -> None:
        validate_border_char("column_separator", column_separator)
        self._config = replace(self._config, column_separator=column_separator)

    def set_min_column_width(self, min_column_width: int) -> None:
        """Set the minimum column width (must be > 0).

        A min above the current max width raises the max to match, so the
        two bounds can be set in either order.
        """
        validate_size("min_column_width", min_column_width, 1)
        max_column_width = max(self._config.max_column_width, min_column_width)
        self._config = replace(
            self._config,
            min_column_width=min_column_width,
            max_column_width=max_column_width,
        )

    def set_max_column_width(self, max_column_width: int) -> None:
        """Set the maximum column width (must be >= the min width)."""
        self._config = replace(self._config, max_column_width=max_column_width)

    def set_column_padding(self, column_padding: int) -> None:
        """Set the number of spaces printed on each side of a cell."""
        self._config = replace(self._config, column_padding=column_padding)

    def disable_separators(self) -> None:
        """Blank out every border character."""
        self._config = self._config.without_borders()

    def disable_corner_marker(self) -> None:
        self._config = self._config.without_corner_marker()

    def disable_row_separator(self) -> None:
        self._config = self._config.without_row_separator()

    def disable_column_separator(self) -> None:
        self._config = self._config.without_column_separator()

    # -------------------------------------------------------------------------
    # Printing
    # -------------------------------------------------------------------------

    def print_table(
        self,
        headers: Sequence[str] | None,
        rows: Iterable[Row | None] | None,
    ) -> None:
        """Print headers and rows as a bordered table.

        Nothing is printed when ``headers`` is empty or ``rows`` is ``None``.
        An empty ``rows`` prints the header block with its borders only.

        Args:
            headers: Column headers; their count fixes the column count
            rows: Data rows. Short rows are padded with blank cells, extra
                cells are dropped, ``None`` cells print blank.
        """
        if not headers:
            logger.debug("Skipping table print: no headers")
            return
        if rows is None:
            logger.debug("Skipping table print: no row data")
            return

        config = self._config
        out = self.out
        column_count = len(headers)
        header_row = _fill_row(headers, column_count)
        grid = [_fill_row(row, column_count) for row in rows]

        widths = compute_widths(
            header_row, grid, config.min_column_width, config.max_column_width
        )
        logger.debug("Printing table: %d rows, column widths %s", len(grid), widths)

        border = _border_line(widths, config)
        _write_line(out, border)
        for line in _row_lines(header_row, widths, config):
            _write_line(out, line)
        _write_line(out, border)
        for row in grid:
            for line in _row_lines(row, widths, config):
                _write_line(out, line)
        _write_line(out, border)

    def print_row(self, headers: Sequence[str] | None, row: Row | None) -> None:
        """Print a table holding a single data row.

        Nothing is printed when ``row`` is ``None``.
        """
        if row is None:
            logger.debug("Skipping table print: no row data")
            return
        self.print_table(headers, [row])

    def print_records(
        self,
        records: Iterable[Any] | None,
        extractor: RecordExtractor = field_extractor,
    ) -> None:
        """Print arbitrary records using an extractor to produce the cells.

        Headers are the labels the extractor returns for the first record.
        Nothing is printed for ``None`` or when there are no records.

        Args:
            records: Records to print, one row each. Any iterable, including
                generators.
            extractor: Maps a record to ordered ``(label, value)`` pairs.
                Defaults to ``field_extractor`` for ``column()``-marked
                dataclass fields.

        Raises:
            ExtractionError: If the extractor fails for any record. Nothing
                is printed in that case.
        """
        extracted = (
            [_extract(extractor, record) for record in records] if records is not None else []
        )
        if not extracted:
            logger.debug("Skipping record print: no records")
            return

        headers = [label for label, _ in extracted[0]]
        rows = [[value for _, value in pairs] for pairs in extracted]
        self.print_table(headers, rows)

    def render(
        self,
        headers: Sequence[str] | None,
        rows: Iterable[Row | None] | None,
    ) -> str:
        """Render headers and rows to a string instead of the output stream.

        Returns:
            The table text, newline-terminated, or ``""`` when nothing
            would be printed
        """
        buffer = io.StringIO()
        target = TablePrinter(buffer, self._config)
        target.print_table(headers, rows)
        return buffer.getvalue()


def _extract(extractor: RecordExtractor, record: Any) -> Sequence[tuple[str, str]]:
    try:
        return list(extractor(record))
    except ExtractionError:
        raise
    except Exception as e:
        raise ExtractionError(record, e) from e


def _fill_row(row: Row | None, column_count: int) -> list[str | None]:
    """Normalize a row to exactly ``column_count`` cells.

    Missing cells become ``None`` (absent), which is distinct from ``""``
    during wrapping. Non-printable characters (newlines, tabs) become spaces
    so every cell occupies exactly ``len(cell)`` columns.
    """
    cells: list[str | None] = [None] * column_count
    if row:
        for i, cell in enumerate(row[:column_count]):
            if cell is not None:
                text = cell if isinstance(cell, str) else str(cell)
                if not text.isprintable():
                    text = "".join(c if c.isprintable() else BLANK for c in text)
                cells[i] = text
    return cells


def _border_line(widths: Sequence[int], config: TableConfig) -> str:
    """Build a horizontal rule matching the width of a rendered row."""
    padding_width = 2 * config.column_padding
    segments = [config.row_separator * (width + padding_width) for width in widths]
    corner = config.corner_marker
    return corner + corner.join(segments) + corner


def _row_lines(
    row: Sequence[str | None],
    widths: Sequence[int],
    config: TableConfig,
) -> Iterator[str]:
    """Yield the physical lines of one logical row.

    A cell longer than its column prints its first ``width`` characters and
    carries the rest to the next line; columns that have run out print blank.
    """
    separator = config.column_separator
    remaining: Sequence[str | None] | None = row

    while remaining is not None:
        next_line: list[str | None] | None = None
        parts: list[str] = []

        for i, width in enumerate(widths):
            parts.append(separator)
            cell = remaining[i]
            if cell is None:
                parts.append(_align("", width, config))
            elif len(cell) > width:
                parts.append(_align(cell[:width], width, config))
                if next_line is None:
                    next_line = [None] * len(widths)
                next_line[i] = cell[width:]
            else:
                parts.append(_align(cell, width, config))

        parts.append(separator)
        yield "".join(parts)
        remaining = next_line


def _align(text: str, width: int, config: TableConfig) -> str:
    """Pad ``text`` to ``width`` per the configured alignment, plus margins."""
    diff = abs(len(text) - width)
    padding = config.padding

    if config.align is Align.RIGHT:
        content = BLANK * diff + text
    elif config.align is Align.CENTER:
        left = diff // 2
        content = BLANK * left + text + BLANK * (diff - left)
    else:
        content = text + BLANK * diff

    return padding + content + padding


def _write_line(out: TextIO, line: str) -> None:
    out.write(line + "\n")
