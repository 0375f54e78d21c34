"""Record extraction for printing arbitrary objects as table rows.

The printer itself only understands headers and string cells. An extractor
turns one record into ordered ``(label, value)`` pairs; the labels of the
first record become the table headers.

Dataclass records can opt fields in with ``column()``:

    @dataclass
    class Server:
        name: str = column()
        region: str = column(header="Region")
        secret: str = ""  # not printed

    TablePrinter().print_records(servers)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Any, Protocol

from .exceptions import ExtractionError, ValidationError

COLUMN_METADATA_KEY = "ruled_table.column"
"""Metadata key marking a dataclass field for display."""


class RecordExtractor(Protocol):
    """Protocol for turning a record into labelled, stringified cells."""

    def __call__(self, record: Any) -> Sequence[tuple[str, str]]:
        """
        Extract display columns from a record.

        Args:
            record: Any object

        Returns:
            Ordered ``(label, value)`` pairs; missing values map to ``""``
        """
        ...


def column(header: str = "", **field_kwargs: Any) -> Any:
    """
    Declare a dataclass field that ``field_extractor`` prints.

    Args:
        header: Column header. Blank uses the field name.
        **field_kwargs: Passed through to ``dataclasses.field``

    Returns:
        A ``dataclasses.field`` carrying the display marker
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[COLUMN_METADATA_KEY] = header
    return dataclasses.field(metadata=metadata, **field_kwargs)


def field_extractor(record: Any) -> list[tuple[str, str]]:
    """
    Extract ``column()``-marked fields from a dataclass instance.

    Fields come out in declaration order. ``None`` values become ``""``,
    everything else goes through ``str()``.

    Raises:
        ExtractionError: If the record is not a dataclass instance or a
            marked field cannot be read
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise ExtractionError(record, "Not a dataclass instance")

    pairs: list[tuple[str, str]] = []
    for f in dataclasses.fields(record):
        if COLUMN_METADATA_KEY not in f.metadata:
            continue
        header = f.metadata[COLUMN_METADATA_KEY]
        label = f.name if not header or not header.strip() else header
        try:
            value = getattr(record, f.name)
        except AttributeError as e:
            raise ExtractionError(record, e) from e
        pairs.append((label, "" if value is None else str(value)))
    return pairs


def mapping_extractor(keys: Sequence[str], headers: Sequence[str] | None = None) -> RecordExtractor:
    """
    Build an extractor for dict-like records.

    Args:
        keys: Keys to read, in column order. Missing keys map to ``""``.
        headers: Column labels; defaults to the keys

    Returns:
        An extractor usable with ``TablePrinter.print_records``

    Raises:
        ValidationError: If ``headers`` and ``keys`` differ in length
    """
    labels = list(headers) if headers is not None else list(keys)
    if len(labels) != len(keys):
        raise ValidationError("headers", headers, f"Must match keys in length ({len(keys)})")

    def extract(record: Any) -> list[tuple[str, str]]:
        try:
            values = [record.get(key) for key in keys]
        except AttributeError as e:
            raise ExtractionError(record, e) from e
        return [
            (label, "" if value is None else str(value)) for label, value in zip(labels, values)
        ]

    return extract
