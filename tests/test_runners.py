import io

import pytest

from prettyterm.putils.runners import (
    print_average_execution_time,
    run_with_default_spinner,
    run_with_spinner,
)
from prettyterm.spinner_printer import DEFAULT_SPINNER


def _spinner(buffer):
    return DEFAULT_SPINNER.with_writer(buffer).with_delay(0.01)


def test_run_with_spinner_returns_result_and_stops():
    buffer = io.StringIO()
    seen = []

    def work(spinner):
        seen.append(spinner)
        assert spinner.is_active
        return "done"

    assert run_with_spinner(_spinner(buffer), work) == "done"
    assert len(seen) == 1
    assert seen[0].is_active is False


def test_run_with_spinner_propagates_errors():
    buffer = io.StringIO()
    seen = []

    def work(spinner):
        seen.append(spinner)
        raise KeyError("boom")

    with pytest.raises(KeyError):
        run_with_spinner(_spinner(buffer), work)
    assert seen[0].is_active is False


def test_run_with_spinner_keeps_resolved_output():
    buffer = io.StringIO()
    run_with_spinner(_spinner(buffer), lambda s: s.success("all good"))
    assert "all good" in buffer.getvalue()


def test_run_with_default_spinner_uses_text(capsys):
    texts = []
    run_with_default_spinner("loading", lambda s: texts.append(s.text))
    assert texts == ["loading"]
    capsys.readouterr()


def test_print_average_execution_time(capsys):
    calls = []
    print_average_execution_time(3, calls.append)
    assert calls == [0, 1, 2]
    assert "Average execution time: " in capsys.readouterr().out


def test_print_average_execution_time_wraps_errors():
    def failing(index):
        raise KeyError(index)

    with pytest.raises(RuntimeError) as info:
        print_average_execution_time(2, failing)
    assert isinstance(info.value.__cause__, KeyError)
    assert "error while calculating average execution time" in str(info.value)


def test_print_average_execution_time_needs_count():
    with pytest.raises(ValueError):
        print_average_execution_time(0, lambda i: None)