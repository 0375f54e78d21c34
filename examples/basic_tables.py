#!/usr/bin/env python3
"""
Basic Table Printing Example

Demonstrates the core ruled-table API: plain grids, wrapping cells,
alignment, blank borders and dataclass records.

Run:
    uv run python examples/basic_tables.py
"""

import logging
from dataclasses import dataclass

from ruled_table import Align, TablePrinter, TablePrinterBuilder, column

HEADERS = ["Service", "Region", "Notes"]
ROWS = [
    ["api", "us-east-1", "primary"],
    ["worker", "eu-west-1", "drains the ingest queue every thirty seconds"],
    ["cron"],
]


@dataclass
class Deployment:
    service: str = column(header="Service")
    version: str = column(header="Version")
    healthy: bool = column(header="Healthy")
    owner_email: str = ""


def main() -> None:
    print("=== Default printer ===\n")
    TablePrinter().print_table(HEADERS, ROWS)

    print("\n=== Compact, right aligned ===\n")
    printer = (
        TablePrinterBuilder()
        .align(Align.RIGHT)
        .min_column_width(4)
        .max_column_width(20)
        .column_padding(1)
        .build()
    )
    printer.print_table(HEADERS, ROWS)

    print("\n=== No borders ===\n")
    printer.disable_separators()
    printer.print_table(HEADERS, ROWS)

    print("\n=== Dataclass records ===\n")
    TablePrinter().print_records(
        [
            Deployment("api", "1.4.2", True, "ops@example.com"),
            Deployment("worker", "1.4.1", False, "ops@example.com"),
        ]
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
