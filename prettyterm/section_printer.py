"""Section titles used to structure longer output into chapters."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, TextIO

from .theme import DEFAULT_THEME, Style, _format, _join_line


@dataclass(frozen=True)
class SectionPrinter:
    """Prints a section title, indented by level and padded with blank lines."""

    style: Style | None = None
    level: int = 0
    indent_character: str = ""
    top_padding: int = 0
    bottom_padding: int = 0
    writer: TextIO | None = field(default=None, compare=False)

    def with_style(self, style: Style) -> SectionPrinter:
        """Return a copy with a different style."""
        return replace(self, style=style)

    def with_level(self, level: int) -> SectionPrinter:
        """Return a copy with a different level."""
        return replace(self, level=level)

    def with_indent_character(self, char: str) -> SectionPrinter:
        """Return a copy with a different indent character."""
        return replace(self, indent_character=char)

    def with_top_padding(self, padding: int) -> SectionPrinter:
        """Return a copy with a different number of blank lines above."""
        return replace(self, top_padding=padding)

    def with_bottom_padding(self, padding: int) -> SectionPrinter:
        """Return a copy with a different number of blank lines below."""
        return replace(self, bottom_padding=padding)

    def with_writer(self, writer: TextIO) -> SectionPrinter:
        """Return a copy that writes to ``writer``."""
        return replace(self, writer=writer)

    def _write(self, text: str) -> None:
        (self.writer if self.writer is not None else sys.stdout).write(text)

    def sprint(self, *args: Any) -> str:
        """Return the section title as a string."""
        style = self.style if self.style is not None else Style()
        prefix = ""
        if self.level > 0:
            prefix = self.indent_character * self.level + " "
        return (
            "\n" * max(self.top_padding, 0)
            + prefix
            + style.sprint(*args)
            + "\n" * max(self.bottom_padding, 0)
        )

    def sprintln(self, *args: Any) -> str:
        """Space-join the operands, append a newline and render the title."""
        return self.sprint(_join_line(args))

    def sprintf(self, fmt: str, *args: Any) -> str:
        """Format printf-style and render the title."""
        return self.sprint(_format(fmt, args))

    def sprintfln(self, fmt: str, *args: Any) -> str:
        """Like :meth:`sprintf`, with a newline appended."""
        return self.sprintf(fmt, *args) + "\n"

    def print(self, *args: Any) -> SectionPrinter:
        """Write :meth:`sprint` output to the writer."""
        self._write(self.sprint(*args))
        return self

    def println(self, *args: Any) -> SectionPrinter:
        """Write :meth:`sprintln` output to the writer."""
        self._write(self.sprintln(*args))
        return self

    def printf(self, fmt: str, *args: Any) -> SectionPrinter:
        """Write :meth:`sprintf` output to the writer."""
        self._write(self.sprintf(fmt, *args))
        return self

    def printfln(self, fmt: str, *args: Any) -> SectionPrinter:
        """Write :meth:`sprintfln` output to the writer."""
        self._write(self.sprintfln(fmt, *args))
        return self

    def print_on_error(self, *args: Any) -> SectionPrinter:
        """Print every operand that is an exception; other operands are ignored."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(arg)
        return self

    def print_on_errorf(self, fmt: str, *args: Any) -> SectionPrinter:
        """Print every exception operand, formatted into ``fmt``."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(fmt % (arg,))
        return self


DEFAULT_SECTION = SectionPrinter(
    style=DEFAULT_THEME.section_style,
    level=1,
    top_padding=1,
    bottom_padding=1,
    indent_character="#",
)