"""Rendering of tabular data with aligned columns and optional separators."""

from __future__ import annotations

import csv
import re
import sys
from dataclasses import dataclass, field, replace
from typing import Iterable, TextIO

from wcwidth import wcswidth, wcwidth

from .theme import DEFAULT_THEME, Style

TableData = list[list[str]]

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def _line_width(line: str) -> int:
    plain = _ANSI_PATTERN.sub("", line)
    width = wcswidth(plain)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in plain)


def _string_max_width(text: str) -> int:
    """Return the display width of the widest line, ignoring escape sequences."""
    return max(_line_width(line) for line in text.split("\n"))


def _box(text: str) -> str:
    lines = text.split("\n")
    width = max(_line_width(line) for line in lines)
    horizontal = "─" * (width + 2)
    body = [f"| {line}{' ' * (width - _line_width(line))} |" for line in lines]
    return "\n".join([f"┌{horizontal}┐", *body, f"└{horizontal}┘"])


@dataclass
class _Cell:
    lines: list[str]
    width: int


@dataclass
class _Row:
    cells: list[_Cell]

    @property
    def height(self) -> int:
        return max((len(cell.lines) for cell in self.cells), default=0)


@dataclass(frozen=True)
class TablePrinter:
    """Renders rows of strings as an aligned table."""

    style: Style | None = None
    has_header: bool = False
    header_style: Style | None = None
    header_row_separator: str = ""
    header_row_separator_style: Style | None = None
    separator: str = ""
    separator_style: Style | None = None
    row_separator: str = ""
    row_separator_style: Style | None = None
    data: TableData = field(default_factory=list)
    boxed: bool = False
    left_alignment: bool = False
    right_alignment: bool = False
    writer: TextIO | None = field(default=None, compare=False)

    def with_style(self, style: Style) -> TablePrinter:
        """Return a copy with a different style."""
        return replace(self, style=style)

    def with_has_header(self, value: bool = True) -> TablePrinter:
        """Return a copy where the first row is treated as a header."""
        return replace(self, has_header=value)

    def with_header_style(self, style: Style) -> TablePrinter:
        """Return a copy with a different header style."""
        return replace(self, header_style=style)

    def with_header_row_separator(self, separator: str) -> TablePrinter:
        """Return a copy with a line separator below the header."""
        return replace(self, header_row_separator=separator)

    def with_header_row_separator_style(self, style: Style) -> TablePrinter:
        """Return a copy with a different header separator style."""
        return replace(self, header_row_separator_style=style)

    def with_separator(self, separator: str) -> TablePrinter:
        """Return a copy with a different column separator."""
        return replace(self, separator=separator)

    def with_separator_style(self, style: Style) -> TablePrinter:
        """Return a copy with a different column separator style."""
        return replace(self, separator_style=style)

    def with_row_separator(self, separator: str) -> TablePrinter:
        """Return a copy with a line separator below every row."""
        return replace(self, row_separator=separator)

    def with_row_separator_style(self, style: Style) -> TablePrinter:
        """Return a copy with a different row separator style."""
        return replace(self, row_separator_style=style)

    def with_data(self, data: Iterable[Iterable[str]]) -> TablePrinter:
        """Return a copy rendering ``data``."""
        return replace(self, data=[list(row) for row in data])

    def with_csv_reader(self, reader: Iterable[list[str]]) -> TablePrinter:
        """Return a copy with data read from a CSV reader; unreadable input keeps the old data."""
        try:
            records = [list(row) for row in reader]
        except csv.Error:
            return replace(self)
        return replace(self, data=records)

    def with_boxed(self, value: bool = True) -> TablePrinter:
        """Return a copy that draws a box around the table."""
        return replace(self, boxed=value)

    def with_left_alignment(self, value: bool = True) -> TablePrinter:
        """Return a copy with left-aligned cells."""
        return replace(self, left_alignment=value, right_alignment=False)

    def with_right_alignment(self, value: bool = True) -> TablePrinter:
        """Return a copy with right-aligned cells."""
        return replace(self, left_alignment=False, right_alignment=value)

    def with_writer(self, writer: TextIO) -> TablePrinter:
        """Return a copy that writes to ``writer``."""
        return replace(self, writer=writer)

    def srender(self) -> str:
        """Return the rendered table."""
        header_style = self.header_style or Style()
        header_separator_style = self.header_row_separator_style or Style()
        row_separator_style = self.row_separator_style or Style()
        separator = (self.separator_style or Style()).sprint(self.separator)

        rows: list[_Row] = []
        column_widths: list[int] = []
        for raw_row in self.data:
            cells = []
            for raw_cell in raw_row:
                lines = raw_cell.split("\n")
                cells.append(_Cell(lines, max(_line_width(line) for line in lines)))
            for column, cell in enumerate(cells):
                if column >= len(column_widths):
                    column_widths.append(cell.width)
                else:
                    column_widths[column] = max(column_widths[column], cell.width)
            rows.append(_Row(cells))

        rendered = [self._render_row(row, column_widths, separator) for row in rows]
        max_row_width = max((_string_max_width(text) for text in rendered), default=0)

        parts: list[str] = []
        for index, text in enumerate(rendered):
            if index == 0 and self.has_header:
                parts.append(header_style.sprint(text))
                if self.header_row_separator:
                    parts.append(header_separator_style.sprint(self.header_row_separator) * max_row_width + "\n")
                continue
            parts.append(text)
            if self.row_separator:
                parts.append(row_separator_style.sprint(self.row_separator) * max_row_width + "\n")

        result = "".join(parts)
        if self.boxed:
            result = _box(result.removesuffix("\n"))
        return result

    def _render_row(self, row: _Row, column_widths: list[int], separator: str) -> str:
        last_column = len(row.cells) - 1
        out: list[str] = []
        for line_index in range(row.height):
            for column, cell in enumerate(row.cells):
                line = cell.lines[line_index] if line_index < len(cell.lines) else ""
                padding = " " * (column_widths[column] - _line_width(line))
                if self.right_alignment:
                    out.append(padding)
                out.append(line)
                if column < last_column:
                    if self.left_alignment:
                        out.append(padding)
                    out.append(separator)
            out.append("\n")
        return "".join(out)

    def render(self) -> None:
        """Write the rendered table, followed by a newline, to the writer."""
        (self.writer if self.writer is not None else sys.stdout).write(self.srender() + "\n")


DEFAULT_TABLE = TablePrinter(
    style=DEFAULT_THEME.table_style,
    header_style=DEFAULT_THEME.table_header_style,
    header_row_separator="",
    header_row_separator_style=DEFAULT_THEME.table_separator_style,
    separator=" | ",
    separator_style=DEFAULT_THEME.table_separator_style,
    row_separator="",
    row_separator_style=DEFAULT_THEME.table_separator_style,
    left_alignment=True,
    right_alignment=False,
)