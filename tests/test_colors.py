import pytest

from prettyterm.putils.colors import HexCodeInvalidError, rgb_from_hex
from prettyterm.rgb import RGB


@pytest.mark.parametrize(
    "hex_code, expected",
    [
        ("#ff0009", RGB(255, 0, 9)),
        ("ff0009", RGB(255, 0, 9)),
        ("ff00090x", RGB(255, 0, 9)),
        ("ff00090X", RGB(255, 0, 9)),
        ("#fba", RGB(255, 187, 170)),
        ("fba", RGB(255, 187, 170)),
        ("fba0x", RGB(255, 187, 170)),
    ],
)
def test_rgb_from_hex(hex_code, expected):
    assert rgb_from_hex(hex_code) == expected


@pytest.mark.parametrize("hex_code", ["faba0x", "faba", "#faba"])
def test_invalid_length(hex_code):
    with pytest.raises(HexCodeInvalidError):
        rgb_from_hex(hex_code)


def test_invalid_syntax():
    with pytest.raises(ValueError) as info:
        rgb_from_hex("fax")
    assert not isinstance(info.value, HexCodeInvalidError)