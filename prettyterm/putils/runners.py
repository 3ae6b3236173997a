"""Helpers that run callables while reporting on them."""

from __future__ import annotations

import sys
import time
from typing import Callable, TypeVar

from ..spinner_printer import DEFAULT_SPINNER, SpinnerPrinter, _format_duration
from ..theme import Color, Style

T = TypeVar("T")


def run_with_spinner(spinner: SpinnerPrinter, func: Callable[[SpinnerPrinter], T]) -> T:
    """Start the spinner, call ``func`` with it and stop it again if still running."""
    running = spinner.start()
    try:
        return func(running)
    finally:
        if running.is_active:
            running.stop()


def run_with_default_spinner(text: str, func: Callable[[SpinnerPrinter], T]) -> T:
    """Like :func:`run_with_spinner`, using the default spinner with ``text``."""
    return run_with_spinner(DEFAULT_SPINNER.with_text(text), func)


def print_average_execution_time(count: int, func: Callable[[int], object]) -> None:
    """Call ``func(i)`` for i in ``range(count)`` and print the average duration."""
    if count <= 0:
        raise ValueError("count must be positive")
    total = 0
    for index in range(count):
        start = time.perf_counter_ns()
        try:
            func(index)
        except Exception as exc:
            raise RuntimeError(f"error while calculating average execution time: {exc}") from exc
        total += time.perf_counter_ns() - start
    average = _format_duration(total // count)
    label = Style(Color.FG_CYAN).sprint("Average execution time: %s")
    sys.stdout.write(label % (Style(Color.BOLD, Color.FG_LIGHT_CYAN).sprint(average),) + "\n")