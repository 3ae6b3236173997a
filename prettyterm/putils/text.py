"""Text layout helpers."""

from __future__ import annotations

from ..table_printer import _line_width


def center_text(text: str) -> str:
    """Center every line relative to the widest line."""
    lines = text.split("\n")
    widest = max(_line_width(line) for line in lines)
    centered = []
    for line in lines:
        gap = widest - _line_width(line)
        left = gap // 2
        centered.append(" " * left + line + " " * (gap - left))
    return "\n".join(centered)