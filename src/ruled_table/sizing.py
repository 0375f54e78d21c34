"""Column width computation."""

from __future__ import annotations

from collections.abc import Sequence


def compute_widths(
    headers: Sequence[str | None],
    rows: Sequence[Sequence[str | None]],
    min_width: int,
    max_width: int,
) -> tuple[int, ...]:
    """
    Compute the content width of every column.

    Each column starts at the larger of ``min_width`` and its header length,
    grows to fit the longest cell in that column, and is finally capped at
    ``max_width``. Content wider than the cap wraps onto extra lines when
    rendered.

    Short rows leave their trailing columns untouched. Cells beyond the
    header count, ``None`` cells and ``None`` rows are ignored.

    Args:
        headers: Column headers; their count fixes the column count
        rows: Data rows
        min_width: Smallest allowed width
        max_width: Largest allowed width

    Returns:
        One width per header
    """
    widths = [max(min_width, len(header or "")) for header in headers]
    column_count = len(widths)

    for row in rows:
        if not row:
            continue
        for j, cell in enumerate(row[:column_count]):
            if cell is not None and len(cell) > widths[j]:
                widths[j] = len(cell)

    return tuple(min(width, max_width) for width in widths)
