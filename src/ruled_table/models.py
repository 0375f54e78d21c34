"""Core models for ruled-table."""

from dataclasses import dataclass, replace
from enum import Enum

from .exceptions import ValidationError

BLANK = " "
"""Character used in place of a disabled border element."""

DEFAULT_CORNER_MARKER = "+"
DEFAULT_ROW_SEPARATOR = "-"
DEFAULT_COLUMN_SEPARATOR = "|"
DEFAULT_MIN_COLUMN_WIDTH = 8
DEFAULT_MAX_COLUMN_WIDTH = 16
DEFAULT_COLUMN_PADDING = 2


class Align(Enum):
    """Alignment of cell content within its column."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, value: "Align | str") -> "Align":
        """
        Resolve an alignment from an enum member, a name or a one-letter code.

        Accepts ``"left"``/``"l"``, ``"right"``/``"r"`` and ``"center"``/``"c"``
        in any case.

        Raises:
            ValidationError: If the value names no alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.value[0]):
                    return member
        raise ValidationError("align", value, "Expected one of 'left', 'right', 'center'")


def validate_size(field_name: str, value: int, minimum: int) -> None:
    """
    Validate a width or padding setting.

    Args:
        field_name: Configuration field being set (used in the error)
        value: The candidate size
        minimum: Smallest accepted value

    Raises:
        ValidationError: If the value is not an ``int`` (``bool`` excluded)
            or is below ``minimum``
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field_name, value, "Must be an integer")
    if value < minimum:
        raise ValidationError(field_name, value, f"Must be {minimum} or greater")


def validate_border_char(field_name: str, value: str, allow_blank: bool = False) -> None:
    """
    Validate a border character.

    Args:
        field_name: Configuration field being set (used in the error)
        value: The candidate character
        allow_blank: Accept the blank character used for disabled borders

    Raises:
        ValidationError: If the value is not a single printable character
    """
    if not isinstance(value, str) or len(value) != 1:
        raise ValidationError(field_name, value, "Must be a single character")
    if value.isspace() and not (allow_blank and value == BLANK):
        raise ValidationError(field_name, value, "Must not be whitespace")


@dataclass(frozen=True)
class TableConfig:
    """
    Rendering configuration for a table.

    Instances are immutable; use the ``without_*`` helpers or
    ``dataclasses.replace`` to derive a changed copy. Border characters may be
    ``BLANK`` to hide an element while keeping its space in the layout.

    Attributes:
        align: Alignment of cell content within each column
        corner_marker: Character at every border intersection
        row_separator: Character filling horizontal border lines
        column_separator: Character between cells of a row
        min_column_width: Smallest content width of a column (> 0)
        max_column_width: Largest content width of a column (>= min)
        column_padding: Spaces on each side of a cell's content (>= 0)
    """

    align: Align = Align.LEFT
    corner_marker: str = DEFAULT_CORNER_MARKER
    row_separator: str = DEFAULT_ROW_SEPARATOR
    column_separator: str = DEFAULT_COLUMN_SEPARATOR
    min_column_width: int = DEFAULT_MIN_COLUMN_WIDTH
    max_column_width: int = DEFAULT_MAX_COLUMN_WIDTH
    column_padding: int = DEFAULT_COLUMN_PADDING

    def __post_init__(self) -> None:
        if not isinstance(self.align, Align):
            raise ValidationError("align", self.align, "A non-null Align is required")
        validate_border_char("corner_marker", self.corner_marker, allow_blank=True)
        validate_border_char("row_separator", self.row_separator, allow_blank=True)
        validate_border_char("column_separator", self.column_separator, allow_blank=True)
        validate_size("min_column_width", self.min_column_width, 1)
        validate_size("max_column_width", self.max_column_width, 1)
        validate_size("column_padding", self.column_padding, 0)
        if self.max_column_width < self.min_column_width:
            raise ValidationError(
                "max_column_width",
                self.max_column_width,
                f"Must be >= min_column_width ({self.min_column_width})",
            )

    @property
    def padding(self) -> str:
        """The blank margin printed on both sides of each cell."""
        return BLANK * self.column_padding

    def without_borders(self) -> "TableConfig":
        """Copy with every border character blanked."""
        return replace(
            self, corner_marker=BLANK, row_separator=BLANK, column_separator=BLANK
        )

    def without_corner_marker(self) -> "TableConfig":
        return replace(self, corner_marker=BLANK)

    def without_row_separator(self) -> "TableConfig":
        return replace(self, row_separator=BLANK)

    def without_column_separator(self) -> "TableConfig":
        return replace(self, column_separator=BLANK)
