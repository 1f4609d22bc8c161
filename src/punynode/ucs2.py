"""Conversion between strings and lists of Unicode code points.

Python strings are already sequences of code points, but text that went through a
UTF-16 based system (``surrogatepass`` decoding, JSON with escaped surrogates) may
still carry a character above U+FFFF as two surrogate halves. ``ucs2_decode``
merges such pairs so the Bootstring encoder always sees scalar values.
"""

from types import SimpleNamespace
from typing import Iterable

from punynode.exceptions import InvalidCodePointError

MAX_CODE_POINT = 0x10FFFF

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def ucs2_decode(text: str) -> list[int]:
    """Return the code points of ``text``, pairing surrogate halves.

    Args:
        text: The string to split into code points.

    Returns:
        list[int]: One integer per Unicode scalar value. Unpaired surrogates are
        kept as they are.
    """
    output: list[int] = []
    counter = 0
    length = len(text)
    while counter < length:
        value = ord(text[counter])
        counter += 1
        if value in _HIGH_SURROGATES and counter < length:
            extra = ord(text[counter])
            if extra in _LOW_SURROGATES:
                value = ((value & 0x3FF) << 10) + (extra & 0x3FF) + 0x10000
                counter += 1
        output.append(value)
    return output


def ucs2_encode(code_points: Iterable[int]) -> str:
    """Build a string from a sequence of code points.

    Args:
        code_points: Integers in the range 0..0x10FFFF.

    Returns:
        str: The corresponding string.

    Raises:
        InvalidCodePointError: If a value is not an integer code point.
    """
    chars = []
    for value in code_points:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidCodePointError(f"Not an integer code point: {value!r}")
        if value < 0 or value > MAX_CODE_POINT:
            raise InvalidCodePointError(f"Code point out of range: {value:#x}")
        chars.append(chr(value))
    return "".join(chars)


# Mirrors the ``punycode.ucs2`` helper object of the JavaScript API.
ucs2 = SimpleNamespace(decode=ucs2_decode, encode=ucs2_encode)
