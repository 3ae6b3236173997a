"""Builders for table data from delimited text and records."""

from __future__ import annotations

import dataclasses
from typing import Any, Sequence

from ..table_printer import DEFAULT_TABLE, TableData, TablePrinter


def _split(text: str, separator: str) -> list[str]:
    if separator == "":
        return list(text)
    return text.split(separator)


def table_data_from_separated_values(text: str, value_separator: str, row_separator: str) -> TableData:
    """Split text into rows, then each row into values."""
    return [_split(line, value_separator) for line in _split(text, row_separator)]


def table_data_from_csv(text: str) -> TableData:
    """Split comma-separated lines into table data."""
    return table_data_from_separated_values(text, ",", "\n")


def table_data_from_tsv(text: str) -> TableData:
    """Split tab-separated lines into table data."""
    return table_data_from_separated_values(text, "\t", "\n")


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def table_from_struct_slice(table_printer: TablePrinter, items: Sequence[Any]) -> TablePrinter:
    """Fill a table from dataclass instances, with the field names as header row.

    Anything that is not a non-empty list or tuple of dataclass instances
    leaves the printer unchanged.
    """
    if not isinstance(items, (list, tuple)) or not items:
        return table_printer
    first = items[0]
    if not dataclasses.is_dataclass(first) or isinstance(first, type):
        return table_printer
    names = [f.name for f in dataclasses.fields(first)]
    records = [names, *([_cell(getattr(item, name)) for name in names] for item in items)]
    return table_printer.with_data(records)


def default_table_from_struct_slice(items: Sequence[Any]) -> TablePrinter:
    """Fill the default table from dataclass instances."""
    return table_from_struct_slice(DEFAULT_TABLE, items)