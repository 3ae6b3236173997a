import io
import time

import pytest

from prettyterm.spinner_printer import (
    DEFAULT_SPINNER,
    SpinnerPrinter,
    _format_duration,
    _round_duration,
)
from prettyterm.theme import Color, Style


def _wait_for(buffer, needle, timeout=3.0):
    deadline = time.monotonic() + timeout
    while needle not in buffer.getvalue() and time.monotonic() < deadline:
        time.sleep(0.005)
    return buffer.getvalue()


STYLE = Style(Color.FG_RED, Color.BG_BLUE, Color.BOLD)


def test_with_delay():
    p = SpinnerPrinter()
    p2 = p.with_delay(1.0)
    assert p2.delay == 1.0
    assert p.delay == 0.0


def test_with_message_style():
    assert SpinnerPrinter().with_message_style(STYLE).message_style == STYLE


def test_with_style():
    assert SpinnerPrinter().with_style(STYLE).style == STYLE


def test_with_timer_style():
    assert SpinnerPrinter().with_timer_style(STYLE).timer_style == STYLE


def test_with_remove_when_done():
    assert SpinnerPrinter().with_remove_when_done().remove_when_done is True


def test_with_show_timer():
    assert SpinnerPrinter().with_show_timer().show_timer is True


def test_with_sequence():
    assert SpinnerPrinter().with_sequence("a", "b", "c").sequence == ("a", "b", "c")


def test_with_text():
    assert SpinnerPrinter().with_text("test").text == "test"


def test_with_timer_rounding_factor():
    assert SpinnerPrinter().with_timer_rounding_factor(0.2).timer_rounding_factor == 0.2


def test_with_writer():
    buffer = io.StringIO()
    p = SpinnerPrinter()
    p2 = p.with_writer(buffer)
    assert p2.writer is buffer
    assert p.writer is None


@pytest.mark.parametrize("method", ["info", "success", "warning", "fail"])
def test_nil_print_uses_text(method):
    buffer = io.StringIO()
    p = SpinnerPrinter(text="hello", writer=buffer)
    getattr(p, method)()
    assert "hello" in buffer.getvalue()
    assert p.is_active is False


@pytest.mark.parametrize("method", ["info", "success", "warning", "fail"])
def test_status_methods_stop_running_spinner(method):
    buffer = io.StringIO()
    spinner = DEFAULT_SPINNER.with_writer(buffer).with_delay(0.01).start("working")
    getattr(spinner, method)("Hello, World!")
    assert spinner.is_active is False
    out = buffer.getvalue()
    assert "Hello, World!" in out
    assert out.endswith("\n")


def test_update_text_simple():
    buffer = io.StringIO()
    p = DEFAULT_SPINNER.with_writer(buffer)
    p.update_text("test")
    assert p.text == "test"
    assert "test" in buffer.getvalue()


def test_update_text_override():
    buffer = io.StringIO()
    spinner = DEFAULT_SPINNER.with_delay(3600).with_writer(buffer).start("An initial long message")
    try:
        spinner.update_text("A short message")
        assert "A short message" in buffer.getvalue()
    finally:
        spinner.stop()


def test_update_text_raw_output():
    buffer = io.StringIO()
    spinner = replace_raw(DEFAULT_SPINNER.with_writer(buffer)).start("first")
    try:
        spinner.update_text("test")
        assert spinner.text == "test"
    finally:
        spinner.stop()
    assert buffer.getvalue().startswith("first\n")
    assert "test\n" in buffer.getvalue()


def replace_raw(spinner):
    spinner = spinner.with_text(spinner.text)
    spinner.raw_output = True
    return spinner


def test_start_returns_active_copy():
    buffer = io.StringIO()
    p = DEFAULT_SPINNER.with_writer(buffer).with_delay(0.01)
    spinner = p.start("running")
    try:
        assert spinner.is_active is True
        assert p.is_active is False
        assert spinner.text == "running"
    finally:
        spinner.stop()
    assert spinner.is_active is False


def test_stop_inactive_writes_nothing():
    buffer = io.StringIO()
    SpinnerPrinter(writer=buffer).stop()
    assert buffer.getvalue() == ""


def test_stop_remove_when_done_leaves_no_newline():
    buffer = io.StringIO()
    spinner = DEFAULT_SPINNER.with_writer(buffer).with_delay(0.01).with_remove_when_done().start("x")
    spinner.stop()
    assert buffer.getvalue().endswith("\r")


@pytest.mark.parametrize("text", ["test", ""])
def test_different_variations(text):
    buffer = io.StringIO()
    spinner = SpinnerPrinter(writer=buffer).start(text) if text else SpinnerPrinter(text="x", writer=buffer).start()
    spinner.stop()
    assert spinner.is_active is False
    assert buffer.getvalue() == "\n"


def test_timer_is_shown():
    buffer = io.StringIO()
    spinner = DEFAULT_SPINNER.with_writer(buffer).with_delay(0.01).start("timed")
    try:
        out = _wait_for(buffer, "(0s)")
    finally:
        spinner.stop()
    assert "(0s)" in out


@pytest.mark.parametrize(
    "action, expected",
    [
        (lambda sp: sp.warning("A warning"), "A warning"),
        (lambda sp: sp.fail("An error"), "An error"),
        (lambda sp: sp.update_text("Updated text"), "Updated text"),
    ],
)
def test_output_to_writers(action, expected):
    buffer = io.StringIO()
    spinner = DEFAULT_SPINNER.with_text("Hello world").with_writer(buffer).with_delay(0.01).start()
    try:
        _wait_for(buffer, "Hello world")
        action(spinner)
    finally:
        spinner.stop()
    out = buffer.getvalue()
    assert "Hello world" in out
    assert expected in out


@pytest.mark.parametrize(
    "nanoseconds, expected",
    [
        (0, "0s"),
        (1_500_000_000, "1.5s"),
        (200_000_000, "200ms"),
        (62_000_000_000, "1m2s"),
        (3_600_000_000_000, "1h0m0s"),
    ],
)
def test_format_duration(nanoseconds, expected):
    assert _format_duration(nanoseconds) == expected


def test_round_duration():
    assert _round_duration(1_400_000_000, 1_000_000_000) == 1_000_000_000
    assert _round_duration(1_500_000_000, 1_000_000_000) == 2_000_000_000
    assert _round_duration(1_234, 0) == 1_234