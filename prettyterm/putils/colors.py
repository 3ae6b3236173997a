"""Colour conversions."""

from __future__ import annotations

import string

from ..rgb import RGB


class HexCodeInvalidError(ValueError):
    """Raised when a hex colour code has the wrong length."""

    def __init__(self, hex_code: str) -> None:
        super().__init__(f"hex code is invalid: {hex_code!r}")
        self.hex_code = hex_code


def rgb_from_hex(hex_code: str) -> RGB:
    """Parse ``#rrggbb``, ``rgb`` or ``0xrrggbb`` style codes into an RGB colour."""
    digits = hex_code.lower().replace("#", "").replace("0x", "")
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    if len(digits) != 6:
        raise HexCodeInvalidError(hex_code)
    if not all(char in string.hexdigits for char in digits):
        raise ValueError(f"invalid syntax in hex code: {hex_code!r}")
    value = int(digits, 16)
    return RGB((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)