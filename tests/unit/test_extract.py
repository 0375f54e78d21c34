"""Tests for record extraction and printing records."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any

import pytest

from ruled_table import (
    ExtractionError,
    TablePrinter,
    ValidationError,
    column,
    field_extractor,
    mapping_extractor,
)
from ruled_table.extract import COLUMN_METADATA_KEY


@dataclass
class Server:
    name: str = column()
    region: str | None = column(header="Region", default=None)
    secret: str = "hunter2"
    tags: list[str] = column(header=" ", default_factory=list)


class TestColumn:
    """Tests for the column() field marker."""

    def test_marks_field(self) -> None:
        f = column(header="Label")
        assert f.metadata[COLUMN_METADATA_KEY] == "Label"

    def test_keeps_existing_metadata(self) -> None:
        f = column(metadata={"unit": "ms"})
        assert f.metadata["unit"] == "ms"
        assert f.metadata[COLUMN_METADATA_KEY] == ""


class TestFieldExtractor:
    """Tests for field_extractor."""

    def test_marked_fields_in_order(self) -> None:
        pairs = field_extractor(Server("api-1", "us-east-1", tags=["a"]))
        assert pairs == [("name", "api-1"), ("Region", "us-east-1"), ("tags", "['a']")]

    def test_none_becomes_empty(self) -> None:
        assert ("Region", "") in field_extractor(Server("api-1"))

    def test_unmarked_fields_skipped(self) -> None:
        labels = [label for label, _ in field_extractor(Server("api-1"))]
        assert "secret" not in labels

    @pytest.mark.parametrize("record", [object(), {"name": "x"}, Server])
    def test_rejects_non_dataclass_instances(self, record: Any) -> None:
        with pytest.raises(ExtractionError, match="Not a dataclass instance"):
            field_extractor(record)

    def test_missing_attribute_wrapped(self) -> None:
        @dataclass
        class Lazy:
            value: int = column(init=False)

        with pytest.raises(ExtractionError) as exc_info:
            field_extractor(Lazy())
        assert isinstance(exc_info.value.__cause__, AttributeError)


class TestMappingExtractor:
    """Tests for mapping_extractor."""

    def test_reads_keys(self) -> None:
        extract = mapping_extractor(["id", "state"], ["ID", "State"])
        assert extract({"id": 7, "state": "ok"}) == [("ID", "7"), ("State", "ok")]

    def test_missing_keys_empty(self) -> None:
        extract = mapping_extractor(["id", "state"])
        assert extract({"id": 7}) == [("id", "7"), ("state", "")]

    def test_header_count_must_match(self) -> None:
        with pytest.raises(ValidationError, match="Must match keys in length") as exc_info:
            mapping_extractor(["id"], ["ID", "Extra"])
        assert exc_info.value.field == "headers"

    def test_non_mapping_wrapped(self) -> None:
        with pytest.raises(ExtractionError):
            mapping_extractor(["id"])(["not", "a", "dict"])


class TestPrintRecords:
    """Tests for TablePrinter.print_records."""

    def test_prints_dataclasses(self, printer: TablePrinter, out: io.StringIO) -> None:
        printer.print_records([Server("api-1", "us-east-1"), Server("worker")])
        lines = out.getvalue().splitlines()
        assert lines[1] == "| name   | Region    | tags  |"
        assert lines[3] == "| api-1  | us-east-1 | []    |"
        assert lines[4] == "| worker |           | []    |"
        assert "hunter2" not in out.getvalue()

    def test_prints_with_custom_extractor(self, printer: TablePrinter, out: io.StringIO) -> None:
        rows = [{"id": 1, "state": "ok"}, {"id": 2}]
        printer.print_records(rows, mapping_extractor(["id", "state"], ["Id", "State"]))
        assert out.getvalue().splitlines()[3:5] == [
            "| 1     | ok    |",
            "| 2     |       |",
        ]

    def test_headers_from_first_record(self, printer: TablePrinter, out: io.StringIO) -> None:
        def extract(record: dict[str, str]) -> list[tuple[str, str]]:
            return list(record.items())

        printer.print_records([{"Alpha": "1"}, {"Beta": "2", "Gamma": "3"}], extract)
        lines = out.getvalue().splitlines()
        assert lines[1] == "| Alpha |"
        assert lines[4] == "| 2     |"

    @pytest.mark.parametrize("records", [None, []])
    def test_no_records_prints_nothing(
        self, printer: TablePrinter, out: io.StringIO, records: list[Any] | None
    ) -> None:
        printer.print_records(records)
        assert out.getvalue() == ""

    def test_empty_generator_prints_nothing(
        self, printer: TablePrinter, out: io.StringIO
    ) -> None:
        records: list[dict[str, str]] = []
        printer.print_records((r for r in records), mapping_extractor(["a"]))
        assert out.getvalue() == ""

    def test_generator_records(self, printer: TablePrinter, out: io.StringIO) -> None:
        printer.print_records(
            ({"id": str(i)} for i in range(2)), mapping_extractor(["id"], ["Id"])
        )
        assert out.getvalue().splitlines()[3:5] == ["| 0     |", "| 1     |"]

    def test_extraction_error_prints_nothing(
        self, printer: TablePrinter, out: io.StringIO
    ) -> None:
        with pytest.raises(ExtractionError):
            printer.print_records([Server("ok"), object()])
        assert out.getvalue() == ""

    def test_extractor_errors_wrapped(self, printer: TablePrinter) -> None:
        def extract(record: dict[str, str]) -> list[tuple[str, str]]:
            return [("Name", record["name"])]

        with pytest.raises(ExtractionError) as exc_info:
            printer.print_records([{"id": "1"}], extract)
        assert isinstance(exc_info.value.__cause__, KeyError)
        assert exc_info.value.record == {"id": "1"}

    def test_no_marked_fields_prints_nothing(
        self, printer: TablePrinter, out: io.StringIO
    ) -> None:
        @dataclass
        class Plain:
            value: int = field(default=1)

        printer.print_records([Plain()])
        assert out.getvalue() == ""
