"""Colours, styles and the theme that bundles every style used for output."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any, Iterable, Iterator

_RESET_SEQUENCE = "\x1b[0m"


class Color(IntEnum):
    """ANSI SGR codes for text options, foreground and background colours."""

    RESET = 0
    BOLD = 1
    FUZZY = 2
    ITALIC = 3
    UNDERSCORE = 4
    BLINK = 5
    FAST_BLINK = 6
    REVERSE = 7
    CONCEALED = 8
    STRIKETHROUGH = 9

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37
    FG_DEFAULT = 39
    FG_DARK_GRAY = 90
    FG_LIGHT_RED = 91
    FG_LIGHT_GREEN = 92
    FG_LIGHT_YELLOW = 93
    FG_LIGHT_BLUE = 94
    FG_LIGHT_MAGENTA = 95
    FG_LIGHT_CYAN = 96
    FG_LIGHT_WHITE = 97
    FG_GRAY = 90

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47
    BG_DEFAULT = 49
    BG_DARK_GRAY = 100
    BG_LIGHT_RED = 101
    BG_LIGHT_GREEN = 102
    BG_LIGHT_YELLOW = 103
    BG_LIGHT_BLUE = 104
    BG_LIGHT_MAGENTA = 105
    BG_LIGHT_CYAN = 106
    BG_LIGHT_WHITE = 107
    BG_GRAY = 100


def _join_args(args: Iterable[Any]) -> str:
    """Join operands, adding a space between two operands when neither is a string."""
    parts: list[str] = []
    previous_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(arg))
        previous_is_str = is_str
    return "".join(parts)


def _join_line(args: Iterable[Any]) -> str:
    """Join operands with single spaces and append a newline."""
    return " ".join(str(arg) for arg in args) + "\n"


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply printf-style formatting; a format without operands is returned as is."""
    return fmt % args if args else fmt


def _render(code: str, text: str) -> str:
    """Wrap text in the SGR sequence for ``code`` followed by a reset."""
    if not code:
        return text
    return f"\x1b[{code}m{text}{_RESET_SEQUENCE}"


class Style:
    """An immutable collection of colours and text options applied together."""

    __slots__ = ("_colors",)

    def __init__(self, *colors: Color | int) -> None:
        self._colors = tuple(Color(color) for color in colors)

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    @property
    def code(self) -> str:
        """The SGR parameter string, e.g. ``"1;33"``."""
        return ";".join(str(int(color)) for color in self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        inner = ", ".join(f"Color.{color.name}" for color in self._colors)
        return f"Style({inner})"

    def sprint(self, *args: Any) -> str:
        """Return the operands as one styled string; each line is styled separately."""
        text = _join_args(args)
        code = self.code
        if not code:
            return text
        restyle = _RESET_SEQUENCE + f"\x1b[{code}m"
        return "\n".join(
            _render(code, line.replace(_RESET_SEQUENCE, restyle)) if line else line
            for line in text.split("\n")
        )

    def sprintln(self, *args: Any) -> str:
        """Like :meth:`sprint`, with a newline appended."""
        return self.sprint(*args) + "\n"

    def sprintf(self, fmt: str, *args: Any) -> str:
        """Format the operands printf-style and style the result."""
        return self.sprint(_format(fmt, args))


def _style_field() -> Any:
    return field(default_factory=Style)


@dataclass(frozen=True)
class Theme:
    """Every style used for output, grouped in one value."""

    default_text: Style = _style_field()
    primary_style: Style = _style_field()
    secondary_style: Style = _style_field()
    highlight_style: Style = _style_field()
    info_message_style: Style = _style_field()
    info_prefix_style: Style = _style_field()
    success_message_style: Style = _style_field()
    success_prefix_style: Style = _style_field()
    warning_message_style: Style = _style_field()
    warning_prefix_style: Style = _style_field()
    error_message_style: Style = _style_field()
    error_prefix_style: Style = _style_field()
    fatal_message_style: Style = _style_field()
    fatal_prefix_style: Style = _style_field()
    description_message_style: Style = _style_field()
    description_prefix_style: Style = _style_field()
    scope_style: Style = _style_field()
    progressbar_bar_style: Style = _style_field()
    progressbar_title_style: Style = _style_field()
    header_text_style: Style = _style_field()
    header_background_style: Style = _style_field()
    spinner_style: Style = _style_field()
    spinner_text_style: Style = _style_field()
    timer_style: Style = _style_field()
    table_style: Style = _style_field()
    table_header_style: Style = _style_field()
    table_separator_style: Style = _style_field()
    heatmap_style: Style = _style_field()
    heatmap_header_style: Style = _style_field()
    heatmap_separator_style: Style = _style_field()
    section_style: Style = _style_field()
    bullet_list_text_style: Style = _style_field()
    bullet_list_bullet_style: Style = _style_field()
    tree_style: Style = _style_field()
    tree_text_style: Style = _style_field()
    letter_style: Style = _style_field()
    debug_message_style: Style = _style_field()
    debug_prefix_style: Style = _style_field()
    box_style: Style = _style_field()
    box_text_style: Style = _style_field()
    bar_label_style: Style = _style_field()
    bar_style: Style = _style_field()

    def with_primary_style(self, style: Style) -> Theme:
        """Return a copy with a different primary style."""
        return replace(self, primary_style=style)

    def with_secondary_style(self, style: Style) -> Theme:
        """Return a copy with a different secondary style."""
        return replace(self, secondary_style=style)

    def with_highlight_style(self, style: Style) -> Theme:
        """Return a copy with a different highlight style."""
        return replace(self, highlight_style=style)

    def with_info_message_style(self, style: Style) -> Theme:
        """Return a copy with a different info message style."""
        return replace(self, info_message_style=style)

    def with_info_prefix_style(self, style: Style) -> Theme:
        """Return a copy with a different info prefix style."""
        return replace(self, info_prefix_style=style)

    def with_success_message_style(self, style: Style) -> Theme:
        """Return a copy with a different success message style."""
        return replace(self, success_message_style=style)

    def with_success_prefix_style(self, style: Style) -> Theme:
        """Return a copy with a different success prefix style."""
        return replace(self, success_prefix_style=style)

    def with_warning_message_style(self, style: Style) -> Theme:
        """Return a copy with a different warning message style."""
        return replace(self, warning_message_style=style)

    def with_warning_prefix_style(self, style: Style) -> Theme:
        """Return a copy with a different warning prefix style."""
        return replace(self, warning_prefix_style=style)

    def with_error_message_style(self, style: Style) -> Theme:
        """Return a copy with a different error message style."""
        return replace(self, error_message_style=style)

    def with_error_prefix_style(self, style: Style) -> Theme:
        """Return a copy with a different error prefix style."""
        return replace(self, error_prefix_style=style)

    def with_fatal_message_style(self, style: Style) -> Theme:
        """Return a copy with a different fatal message style."""
        return replace(self, fatal_message_style=style)

    def with_fatal_prefix_style(self, style: Style) -> Theme:
        """Return a copy with a different fatal prefix style."""
        return replace(self, fatal_prefix_style=style)

    def with_description_message_style(self, style: Style) -> Theme:
        """Return a copy with a different description message style."""
        return replace(self, description_message_style=style)

    def with_description_prefix_style(self, style: Style) -> Theme:
        """Return a copy with a different description prefix style."""
        return replace(self, description_prefix_style=style)

    def with_bullet_list_text_style(self, style: Style) -> Theme:
        """Return a copy with a different bullet list text style."""
        return replace(self, bullet_list_text_style=style)

    def with_bullet_list_bullet_style(self, style: Style) -> Theme:
        """Return a copy with a different bullet list bullet style."""
        return replace(self, bullet_list_bullet_style=style)

    def with_letter_style(self, style: Style) -> Theme:
        """Return a copy with a different letter style."""
        return replace(self, letter_style=style)

    def with_debug_message_style(self, style: Style) -> Theme:
        """Return a copy with a different debug message style."""
        return replace(self, debug_message_style=style)

    def with_debug_prefix_style(self, style: Style) -> Theme:
        """Return a copy with a different debug prefix style."""
        return replace(self, debug_prefix_style=style)

    def with_tree_style(self, style: Style) -> Theme:
        """Return a copy with a different tree style."""
        return replace(self, tree_style=style)

    def with_tree_text_style(self, style: Style) -> Theme:
        """Return a copy with a different tree text style."""
        return replace(self, tree_text_style=style)

    def with_box_style(self, style: Style) -> Theme:
        """Return a copy with a different box style."""
        return replace(self, box_style=style)

    def with_box_text_style(self, style: Style) -> Theme:
        """Return a copy with a different box text style."""
        return replace(self, box_text_style=style)

    def with_bar_label_style(self, style: Style) -> Theme:
        """Return a copy with a different bar label style."""
        return replace(self, bar_label_style=style)

    def with_bar_style(self, style: Style) -> Theme:
        """Return a copy with a different bar style."""
        return replace(self, bar_style=style)


DEFAULT_THEME = Theme(
    default_text=Style(Color.FG_DEFAULT, Color.BG_DEFAULT),
    primary_style=Style(Color.FG_LIGHT_CYAN),
    secondary_style=Style(Color.FG_LIGHT_MAGENTA),
    highlight_style=Style(Color.BOLD, Color.FG_YELLOW),
    info_message_style=Style(Color.FG_LIGHT_CYAN),
    info_prefix_style=Style(Color.FG_BLACK, Color.BG_CYAN),
    success_message_style=Style(Color.FG_GREEN),
    success_prefix_style=Style(Color.FG_BLACK, Color.BG_GREEN),
    warning_message_style=Style(Color.FG_YELLOW),
    warning_prefix_style=Style(Color.FG_BLACK, Color.BG_YELLOW),
    error_message_style=Style(Color.FG_LIGHT_RED),
    error_prefix_style=Style(Color.FG_BLACK, Color.BG_LIGHT_RED),
    fatal_message_style=Style(Color.FG_LIGHT_RED),
    fatal_prefix_style=Style(Color.FG_BLACK, Color.BG_LIGHT_RED),
    description_message_style=Style(Color.FG_DEFAULT),
    description_prefix_style=Style(Color.FG_LIGHT_WHITE, Color.BG_DARK_GRAY),
    scope_style=Style(Color.FG_GRAY),
    progressbar_bar_style=Style(Color.FG_CYAN),
    progressbar_title_style=Style(Color.FG_LIGHT_CYAN),
    header_text_style=Style(Color.FG_LIGHT_WHITE, Color.BOLD),
    header_background_style=Style(Color.BG_GRAY),
    spinner_style=Style(Color.FG_LIGHT_CYAN),
    spinner_text_style=Style(Color.FG_LIGHT_WHITE),
    timer_style=Style(Color.FG_GRAY),
    table_style=Style(Color.FG_DEFAULT),
    table_header_style=Style(Color.FG_LIGHT_CYAN),
    table_separator_style=Style(Color.FG_GRAY),
    heatmap_style=Style(Color.FG_DEFAULT),
    heatmap_header_style=Style(Color.FG_LIGHT_CYAN),
    heatmap_separator_style=Style(Color.FG_DEFAULT),
    section_style=Style(Color.BOLD, Color.FG_YELLOW),
    bullet_list_text_style=Style(Color.FG_DEFAULT),
    bullet_list_bullet_style=Style(Color.FG_GRAY),
    tree_style=Style(Color.FG_GRAY),
    tree_text_style=Style(Color.FG_DEFAULT),
    letter_style=Style(Color.FG_DEFAULT),
    debug_message_style=Style(Color.FG_GRAY),
    debug_prefix_style=Style(Color.FG_BLACK, Color.BG_GRAY),
    box_style=Style(Color.FG_DEFAULT),
    box_text_style=Style(Color.FG_DEFAULT),
    bar_label_style=Style(Color.FG_LIGHT_CYAN),
    bar_style=Style(Color.FG_CYAN),
)