import io

import pytest

from prettyterm.section_printer import DEFAULT_SECTION, SectionPrinter
from prettyterm.theme import Color, Style

PRINTABLES = ["Hello, World!", 1337, True, False, -1337, "c", 1.5, "\\", "%s"]


@pytest.fixture
def plain():
    return DEFAULT_SECTION.with_style(Style())


def test_nil_print(capsys):
    SectionPrinter().println("Hello, World!")
    assert capsys.readouterr().out == "Hello, World!\n"


def test_default_sprint(plain):
    assert plain.sprint("Hello") == "\n# Hello\n"


def test_level_two(plain):
    assert plain.with_level(2).sprint("Title") == "\n## Title\n"


def test_level_zero_has_no_prefix(plain):
    assert plain.with_level(0).sprint("Title") == "\nTitle\n"


def test_padding(plain):
    printer = plain.with_top_padding(2).with_bottom_padding(0)
    assert printer.sprint("x") == "\n\n# x"


def test_sprintln(plain):
    assert plain.sprintln("Hello") == "\n# Hello\n\n"


def test_sprintfln(plain):
    assert plain.sprintfln("Hello, %s!", "you") == "\n# Hello, you!\n\n"


def test_styled_sprint_contains_code():
    result = DEFAULT_SECTION.sprint("Hello")
    assert "\x1b[1;33mHello\x1b[0m" in result


@pytest.mark.parametrize("printable", PRINTABLES)
def test_sprint_contains(printable):
    assert str(printable) in DEFAULT_SECTION.sprint(printable)


@pytest.mark.parametrize("printable", PRINTABLES)
def test_sprintf_contains(printable):
    assert f"Hello, {printable}!" in DEFAULT_SECTION.sprintf("Hello, %s!", printable)


@pytest.mark.parametrize("printable", PRINTABLES)
def test_sprintln_contains(printable):
    assert str(printable) in DEFAULT_SECTION.sprintln(printable)


@pytest.mark.parametrize("printable", PRINTABLES)
def test_print_contains(printable, capsys):
    DEFAULT_SECTION.print(printable)
    assert str(printable) in capsys.readouterr().out


@pytest.mark.parametrize("printable", PRINTABLES)
def test_printf_contains(printable, capsys):
    DEFAULT_SECTION.printf("Hello, %s!", printable)
    assert f"Hello, {printable}!" in capsys.readouterr().out


@pytest.mark.parametrize("printable", PRINTABLES)
def test_printfln_contains(printable, capsys):
    DEFAULT_SECTION.printfln("Hello, %s!", printable)
    assert f"Hello, {printable}!" in capsys.readouterr().out


@pytest.mark.parametrize("printable", PRINTABLES)
def test_println_contains(printable, capsys):
    DEFAULT_SECTION.println(printable)
    assert str(printable) in capsys.readouterr().out


def test_print_to_writer(plain):
    buf = io.StringIO()
    returned = plain.with_writer(buf).print("Hi")
    assert buf.getvalue() == "\n# Hi\n"
    assert returned.writer is buf


def test_print_on_error(capsys):
    DEFAULT_SECTION.print_on_error(ValueError("hello world"))
    assert "hello world" in capsys.readouterr().out


def test_print_on_error_without_error(capsys):
    DEFAULT_SECTION.print_on_error(None)
    assert capsys.readouterr().out == ""


def test_print_on_errorf(capsys):
    DEFAULT_SECTION.print_on_errorf("wrapping error : %s", ValueError("hello world"))
    assert "wrapping error : hello world" in capsys.readouterr().out


def test_print_on_errorf_without_error(capsys):
    DEFAULT_SECTION.print_on_errorf("", None)
    assert capsys.readouterr().out == ""


def test_with_bottom_padding():
    p = SectionPrinter()
    assert p.with_bottom_padding(1337).bottom_padding == 1337
    assert p.bottom_padding == 0


def test_with_level():
    p = SectionPrinter()
    assert p.with_level(1337).level == 1337
    assert p.level == 0


def test_with_style():
    p = SectionPrinter()
    s = Style(Color.FG_RED, Color.BG_RED, Color.BOLD)
    assert p.with_style(s).style == s
    assert p.style is None


def test_with_top_padding():
    p = SectionPrinter()
    assert p.with_top_padding(1337).top_padding == 1337
    assert p.top_padding == 0


def test_with_indent_character():
    p = SectionPrinter()
    assert p.with_indent_character("#").indent_character == "#"
    assert p.indent_character == ""


def test_with_writer():
    p = SectionPrinter()
    buf = io.StringIO()
    assert p.with_writer(buf).writer is buf
    assert p.writer is None