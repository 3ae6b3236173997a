"""An animated spinner for work whose progress is unknown."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field, replace
from typing import Any, TextIO

from .terminal import get_terminal_width
from .theme import DEFAULT_THEME, Style, _join_args

_NANOSECONDS_PER_SECOND = 1_000_000_000

_active_spinners: list[SpinnerPrinter] = []


def _round_duration(nanoseconds: int, multiple: int) -> int:
    """Round to the nearest multiple; halfway values round away from zero."""
    if multiple <= 0:
        return nanoseconds
    remainder = nanoseconds % multiple
    if remainder + remainder < multiple:
        return nanoseconds - remainder
    return nanoseconds + multiple - remainder


def _fraction(value: int, unit: int) -> str:
    whole, rest = divmod(value, unit)
    if not rest:
        return str(whole)
    digits = str(rest).rjust(len(str(unit)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"


def _format_duration(nanoseconds: int) -> str:
    """Format a duration in nanoseconds the way ``1h2m3.5s`` or ``200ms`` reads."""
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    value = abs(nanoseconds)
    if value < 1_000:
        return f"{sign}{value}ns"
    if value < 1_000_000:
        return f"{sign}{_fraction(value, 1_000)}µs"
    if value < _NANOSECONDS_PER_SECOND:
        return f"{sign}{_fraction(value, 1_000_000)}ms"
    hours, rest = divmod(value, 3600 * _NANOSECONDS_PER_SECOND)
    minutes, rest = divmod(rest, 60 * _NANOSECONDS_PER_SECOND)
    text = sign
    if hours:
        text += f"{hours}h"
    if hours or minutes:
        text += f"{minutes}m"
    return text + _fraction(rest, _NANOSECONDS_PER_SECOND) + "s"


@dataclass(frozen=True)
class _StatusPrinter:
    """Renders a message behind a labelled, styled prefix."""

    label: str
    prefix_style: Style
    message_style: Style

    def sprint(self, *args: Any) -> str:
        return self.prefix_style.sprint(f" {self.label} ") + " " + self.message_style.sprint(_join_args(args))


_INFO = _StatusPrinter("INFO", DEFAULT_THEME.info_prefix_style, DEFAULT_THEME.info_message_style)
_SUCCESS = _StatusPrinter("SUCCESS", DEFAULT_THEME.success_prefix_style, DEFAULT_THEME.success_message_style)
_ERROR = _StatusPrinter("ERROR", DEFAULT_THEME.error_prefix_style, DEFAULT_THEME.error_message_style)
_WARNING = _StatusPrinter("WARNING", DEFAULT_THEME.warning_prefix_style, DEFAULT_THEME.warning_message_style)


@dataclass
class SpinnerPrinter:
    """A looping animation with a message, resolving into a status line when done."""

    text: str = ""
    sequence: tuple[str, ...] = ()
    style: Style | None = None
    delay: float = 0.0
    message_style: Style | None = None
    info_printer: Any = None
    success_printer: Any = None
    fail_printer: Any = None
    warning_printer: Any = None
    remove_when_done: bool = False
    show_timer: bool = False
    timer_rounding_factor: float = 0.0
    timer_style: Style | None = None
    raw_output: bool = False
    writer: TextIO | None = field(default=None, compare=False)
    is_active: bool = field(default=False, compare=False)
    _started_at: float = field(default=0.0, init=False, repr=False, compare=False)
    _current_sequence: str = field(default="", init=False, repr=False, compare=False)
    _stop_event: threading.Event = field(default_factory=threading.Event, init=False, repr=False, compare=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)
    _thread: threading.Thread | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.sequence = tuple(self.sequence)

    def with_text(self, text: str) -> SpinnerPrinter:
        """Return a copy with a different message."""
        return replace(self, text=text)

    def with_sequence(self, *args: str) -> SpinnerPrinter:
        """Return a copy animating through the given frames."""
        return replace(self, sequence=tuple(args))

    def with_style(self, style: Style) -> SpinnerPrinter:
        """Return a copy with a different frame style."""
        return replace(self, style=style)

    def with_delay(self, delay: float) -> SpinnerPrinter:
        """Return a copy with a different delay between frames, in seconds."""
        return replace(self, delay=delay)

    def with_message_style(self, style: Style) -> SpinnerPrinter:
        """Return a copy with a different message style."""
        return replace(self, message_style=style)

    def with_remove_when_done(self, value: bool = True) -> SpinnerPrinter:
        """Return a copy that removes its line when stopped."""
        return replace(self, remove_when_done=value)

    def with_show_timer(self, value: bool = True) -> SpinnerPrinter:
        """Return a copy that shows how long it has been running."""
        return replace(self, show_timer=value)

    def with_timer_rounding_factor(self, factor: float) -> SpinnerPrinter:
        """Return a copy rounding the timer to multiples of ``factor`` seconds."""
        return replace(self, timer_rounding_factor=factor)

    def with_timer_style(self, style: Style) -> SpinnerPrinter:
        """Return a copy with a different timer style."""
        return replace(self, timer_style=style)

    def with_writer(self, writer: TextIO) -> SpinnerPrinter:
        """Return a copy that writes to ``writer``."""
        return replace(self, writer=writer)

    def _write(self, text: str) -> None:
        out = self.writer if self.writer is not None else sys.stdout
        with self._lock:
            out.write(text)
            flush = getattr(out, "flush", None)
            if flush is not None:
                flush()

    def _printo(self, text: str = "") -> None:
        self._write("\r" + text)

    def _clear_line(self) -> None:
        self._printo(" " * get_terminal_width())

    def _line(self, frame: str, timer: str = "") -> str:
        style = self.style if self.style is not None else Style()
        message_style = self.message_style if self.message_style is not None else Style()
        timer_style = self.timer_style if self.timer_style is not None else Style()
        return style.sprint(frame) + " " + message_style.sprint(self.text) + timer_style.sprint(timer)

    def update_text(self, text: str) -> None:
        """Change the message; takes effect immediately while running."""
        self.text = text
        if self.raw_output:
            self._write(text + "\n")
        else:
            self._printo(self._line(self._current_sequence))

    def start(self, *args: Any) -> SpinnerPrinter:
        """Return a running copy of this spinner; operands replace the message."""
        spinner = replace(self)
        if args:
            spinner.text = _join_args(args)
        spinner.is_active = True
        spinner._started_at = time.monotonic()
        _active_spinners.append(spinner)
        if spinner.raw_output:
            spinner._write(spinner.text + "\n")
        spinner._thread = threading.Thread(target=spinner._animate, daemon=True)
        spinner._thread.start()
        return spinner

    def _animate(self) -> None:
        while self.is_active and not self._stop_event.is_set():
            if not self.sequence:
                self._stop_event.wait(max(self.delay, 0.01))
                continue
            for frame in self.sequence:
                if not self.is_active:
                    break
                if self.raw_output:
                    self._stop_event.wait(self.delay)
                    continue
                timer = ""
                if self.show_timer:
                    elapsed = int((time.monotonic() - self._started_at) * _NANOSECONDS_PER_SECOND)
                    factor = int(self.timer_rounding_factor * _NANOSECONDS_PER_SECOND)
                    timer = f" ({_format_duration(_round_duration(elapsed, factor))})"
                self._printo(self._line(frame, timer))
                self._current_sequence = frame
                self._stop_event.wait(self.delay)

    def _halt(self) -> bool:
        """End the animation; return whether it was running."""
        if not self.is_active:
            return False
        self.is_active = False
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        if self in _active_spinners:
            _active_spinners.remove(self)
        return True

    def _finish(self) -> None:
        if self.remove_when_done:
            self._clear_line()
            self._printo()
        else:
            self._write("\n")

    def stop(self) -> None:
        """Stop immediately without resolving into a status line."""
        if self._halt():
            self._finish()

    def _resolve(self, printer: Any, message: tuple[Any, ...]) -> None:
        was_active = self._halt()
        if not message:
            message = (self.text,)
        self._clear_line()
        self._printo(printer.sprint(*message))
        if was_active:
            self._finish()

    def info(self, *args: Any) -> None:
        """Show an info line and stop; the message defaults to the spinner text."""
        self._resolve(self.info_printer or _INFO, args)

    def success(self, *args: Any) -> None:
        """Show a success line and stop; the message defaults to the spinner text."""
        self._resolve(self.success_printer or _SUCCESS, args)

    def fail(self, *args: Any) -> None:
        """Show an error line and stop; the message defaults to the spinner text."""
        self._resolve(self.fail_printer or _ERROR, args)

    def warning(self, *args: Any) -> None:
        """Show a warning line and stop; the message defaults to the spinner text."""
        self._resolve(self.warning_printer or _WARNING, args)


DEFAULT_SPINNER = SpinnerPrinter(
    sequence=("▀ ", " ▀", " ▄", "▄ "),
    style=DEFAULT_THEME.spinner_style,
    delay=0.2,
    show_timer=True,
    timer_rounding_factor=1.0,
    timer_style=DEFAULT_THEME.timer_style,
    message_style=DEFAULT_THEME.spinner_text_style,
    info_printer=_INFO,
    success_printer=_SUCCESS,
    fail_printer=_ERROR,
    warning_printer=_WARNING,
)