"""Terminal size detection with overridable fallbacks and forced sizes."""

from __future__ import annotations

import os
from dataclasses import dataclass

FALLBACK_TERMINAL_WIDTH = 80
FALLBACK_TERMINAL_HEIGHT = 10

_STDOUT_FD = 1


@dataclass
class _ForcedSize:
    width: int = 0
    height: int = 0


_forced = _ForcedSize()


def get_terminal_width() -> int:
    """Return the width of the active terminal."""
    if _forced.width > 0:
        return _forced.width
    return get_terminal_size()[0]


def get_terminal_height() -> int:
    """Return the height of the active terminal."""
    if _forced.height > 0:
        return _forced.height
    return get_terminal_size()[1]


def get_terminal_size() -> tuple[int, int, bool]:
    """Return ``(width, height, detected)`` for standard output.

    ``detected`` is False when the size could not be queried; the fallback
    values are then returned for width and height.
    """
    if _forced.width > 0 and _forced.height > 0:
        return _forced.width, _forced.height, True
    try:
        width, height = os.get_terminal_size(_STDOUT_FD)
        detected = True
    except (OSError, ValueError):
        width = height = 0
        detected = False
    if width <= 0:
        width = FALLBACK_TERMINAL_WIDTH
    if height <= 0:
        height = FALLBACK_TERMINAL_HEIGHT
    return width, height, detected


def set_forced_terminal_size(width: int, height: int) -> None:
    """Force the reported terminal size; zero values turn detection back on."""
    _forced.width = int(width)
    _forced.height = int(height)