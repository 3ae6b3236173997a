"""True-colour output: single RGB colours and combined RGB styles."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

from .theme import Color, _format, _join_args, _join_line, _render


def _write(text: str) -> None:
    sys.stdout.write(text)


def _map_range(from_min: float, from_max: float, to_min: float, to_max: float, current: float) -> int:
    if from_max - from_min == 0:
        return 0
    return int(to_min + ((to_max - to_min) / (from_max - from_min)) * (current - from_min))


@dataclass(frozen=True)
class RGB:
    """A 24-bit colour, applied to the foreground or, if set, the background."""

    r: int
    g: int
    b: int
    background: bool = False

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an integer between 0 and 255, got {value!r}")

    def _ansi(self, background: bool) -> str:
        return f"{48 if background else 38};2;{self.r};{self.g};{self.b}"

    def fade(self, minimum: float, maximum: float, current: float, *args: RGB) -> RGB:
        """Blend from this colour through ``args`` as ``current`` moves from minimum to maximum."""
        ends = args
        if maximum == current:
            if not ends:
                raise ValueError("fade needs a target colour when current equals maximum")
            return ends[-1]
        if minimum < 0:
            maximum -= minimum
            current -= minimum
            minimum = 0
        if len(ends) == 1:
            end = ends[0]
            channels = (
                _map_range(minimum, maximum, start, stop, current) % 256
                for start, stop in zip((self.r, self.g, self.b), (end.r, end.g, end.b))
            )
            return RGB(*channels, background=self.background)
        if len(ends) > 1:
            step = (maximum - minimum) / len(ends)
            if step > current:
                return self.fade(minimum, step, current, ends[0])
            remaining = current
            for start, stop in zip(ends, ends[1:]):
                remaining -= step
                if step > remaining:
                    return start.fade(minimum, minimum + step, remaining, stop)
        return self

    def sprint(self, *args: Any) -> str:
        """Return the operands coloured with this colour."""
        text = _render(self._ansi(self.background), _join_args(args))
        if self.background:
            return text + "\x1b[0m\x1b[K"
        return text

    def sprintln(self, *args: Any) -> str:
        """Space-join the operands, append a newline and colour the result."""
        return self.sprint(_join_line(args))

    def sprintf(self, fmt: str, *args: Any) -> str:
        """Format printf-style and colour the result."""
        return self.sprint(_format(fmt, args))

    def sprintfln(self, fmt: str, *args: Any) -> str:
        """Like :meth:`sprintf`, with a newline appended."""
        return self.sprintf(fmt, *args) + "\n"

    def print(self, *args: Any) -> RGB:
        """Write :meth:`sprint` output to standard output."""
        _write(self.sprint(*args))
        return self

    def println(self, *args: Any) -> RGB:
        """Write :meth:`sprintln` output to standard output."""
        _write(self.sprintln(*args))
        return self

    def printf(self, fmt: str, *args: Any) -> RGB:
        """Write :meth:`sprintf` output to standard output."""
        _write(self.sprintf(fmt, *args))
        return self

    def printfln(self, fmt: str, *args: Any) -> RGB:
        """Write :meth:`sprintfln` output to standard output."""
        _write(self.sprintfln(fmt, *args))
        return self

    def print_on_error(self, *args: Any) -> RGB:
        """Print every operand that is an exception; other operands are ignored."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(arg)
        return self

    def print_on_errorf(self, fmt: str, *args: Any) -> RGB:
        """Print every exception operand, formatted into ``fmt``."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(fmt % (arg,))
        return self

    def to_rgb_style(self) -> RGBStyle:
        """Return an RGBStyle using this colour as foreground or background."""
        if self.background:
            return RGBStyle(foreground=RGB(0, 0, 0), background=self)
        return RGBStyle(foreground=self)


@dataclass(frozen=True)
class RGBStyle:
    """A foreground colour, an optional background colour and text options."""

    foreground: RGB = RGB(0, 0, 0)
    background: RGB | None = None
    options: tuple[Color, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", tuple(Color(option) for option in self.options))

    def add_options(self, *args: Color) -> RGBStyle:
        """Return a copy with the given options appended."""
        return replace(self, options=self.options + tuple(args))

    @property
    def _code(self) -> str:
        parts = [self.foreground._ansi(False)]
        if self.background is not None:
            parts.append(self.background._ansi(True))
        parts.extend(str(int(option)) for option in self.options)
        return ";".join(parts)

    def sprint(self, *args: Any) -> str:
        """Return the operands rendered in this style."""
        return _render(self._code, _join_args(args))

    def sprintln(self, *args: Any) -> str:
        """Like :meth:`sprint`, with a newline appended."""
        return self.sprint(*args) + "\n"

    def sprintf(self, fmt: str, *args: Any) -> str:
        """Format printf-style and render the result in this style."""
        return self.sprint(_format(fmt, args))

    def sprintfln(self, fmt: str, *args: Any) -> str:
        """Like :meth:`sprintf`, with a newline appended."""
        return self.sprintf(fmt, *args) + "\n"

    def print(self, *args: Any) -> RGBStyle:
        """Write :meth:`sprint` output to standard output."""
        _write(self.sprint(*args))
        return self

    def println(self, *args: Any) -> RGBStyle:
        """Write :meth:`sprintln` output to standard output."""
        _write(self.sprintln(*args))
        return self

    def printf(self, fmt: str, *args: Any) -> RGBStyle:
        """Style the operands, then place them into ``fmt`` and write it."""
        _write(fmt % (self.sprint(*args),))
        return self

    def printfln(self, fmt: str, *args: Any) -> RGBStyle:
        """Like :meth:`printf`, with a newline appended."""
        _write(fmt % (self.sprint(*args),) + "\n")
        return self

    def print_on_error(self, *args: Any) -> RGBStyle:
        """Print every operand that is an exception; other operands are ignored."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(arg)
        return self

    def print_on_errorf(self, fmt: str, *args: Any) -> RGBStyle:
        """Print every exception operand, formatted into ``fmt``."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(fmt % (arg,))
        return self


def new_rgb_style(foreground: RGB, background: RGB | None = None) -> RGBStyle:
    """Create an RGBStyle; the colours are used as given, ignoring their background flag."""
    return RGBStyle(foreground=foreground, background=background)