"""Bootstring encoder and decoder with the Punycode parameters (RFC 3492).

Every call keeps its state (``n``, ``bias``, ``delta``/``i`` and the output buffer)
in local variables, so the functions are re-entrant and thread safe.

Python integers never overflow, so the 32-bit limits of the RFC are enforced
explicitly through ``MAX_INT``.
"""

from punynode.exceptions import InvalidInputError, NotBasicError, PunycodeOverflowError
from punynode.ucs2 import MAX_CODE_POINT, ucs2_decode, ucs2_encode

# Highest positive signed 32-bit value (2^31 - 1)
MAX_INT = 2147483647

# Bootstring parameters for Punycode
BASE = 36
T_MIN = 1
T_MAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 128  # 0x80
DELIMITER = "-"  # 0x2D


def basic_to_digit(code_point: int) -> int:
    """Return the digit value of a basic code point, or ``BASE`` if it has none."""
    if 0x30 <= code_point < 0x3A:  # 0-9
        return 26 + (code_point - 0x30)
    if 0x41 <= code_point < 0x5B:  # A-Z
        return code_point - 0x41
    if 0x61 <= code_point < 0x7B:  # a-z
        return code_point - 0x61
    return BASE


def digit_to_basic(digit: int, uppercase: bool = False) -> int:
    """Return the basic code point for a digit.

    0..25 map to ``a``-``z`` (``A``-``Z`` when ``uppercase`` is set) and 26..35
    map to ``0``-``9``.
    """
    if digit < 26:
        return digit + (0x41 if uppercase else 0x61)
    return digit - 26 + 0x30


def _threshold(k: int, bias: int) -> int:
    if k <= bias:
        return T_MIN
    if k >= bias + T_MAX:
        return T_MAX
    return k - bias


def adapt(delta: int, num_points: int, first_time: bool) -> int:
    """Bias adaptation function (RFC 3492 section 6.1).

    Args:
        delta: The delta just encoded or decoded.
        num_points: Number of code points handled so far, including this one.
        first_time: True for the very first delta of a string.

    Returns:
        int: The new bias.
    """
    k = 0
    delta = delta // DAMP if first_time else delta >> 1
    delta += delta // num_points
    base_minus_t_min = BASE - T_MIN
    while delta > (base_minus_t_min * T_MAX) >> 1:
        delta //= base_minus_t_min
        k += BASE
    return k + (base_minus_t_min + 1) * delta // (delta + SKEW)


def _encode_integer(q: int, bias: int) -> list[str]:
    """Emit ``q`` as a generalized variable-length integer."""
    digits = []
    k = BASE
    while True:
        t = _threshold(k, bias)
        if q < t:
            break
        q_minus_t = q - t
        base_minus_t = BASE - t
        digits.append(chr(digit_to_basic(t + q_minus_t % base_minus_t)))
        q = q_minus_t // base_minus_t
        k += BASE
    digits.append(chr(digit_to_basic(q)))
    return digits


def encode(text: str) -> str:
    """Convert a string of Unicode symbols to a Punycode string of ASCII symbols.

    Args:
        text: The string to encode. Basic code points are copied verbatim.

    Returns:
        str: The Punycode form, without any ``xn--`` prefix.

    Raises:
        PunycodeOverflowError: If the input would need integers wider than 32 bits.
    """
    code_points = ucs2_decode(text)
    output = [chr(cp) for cp in code_points if cp < 0x80]

    basic_length = len(output)
    handled = basic_length
    if basic_length > 0:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS

    while handled < len(code_points):
        # Smallest code point not handled yet. There is always one because only
        # non-basic code points remain unhandled.
        m = min(cp for cp in code_points if cp >= n)
        handled_plus_one = handled + 1
        if m - n > (MAX_INT - delta) // handled_plus_one:
            raise PunycodeOverflowError()

        delta += (m - n) * handled_plus_one
        n = m

        for current in code_points:
            if current < n:
                delta += 1
                if delta > MAX_INT:
                    raise PunycodeOverflowError()
            if current == n:
                output.extend(_encode_integer(delta, bias))
                bias = adapt(delta, handled_plus_one, handled == basic_length)
                delta = 0
                handled += 1
                handled_plus_one = handled + 1

        delta += 1
        n += 1

    return "".join(output)


def decode(text: str) -> str:
    """Convert a Punycode string of ASCII symbols to a string of Unicode symbols.

    Everything before the last ``-`` is the basic prefix. When the only ``-`` is
    the first character the prefix is empty and the delimiter is read as a digit,
    which fails.

    Args:
        text: The Punycode string, without any ``xn--`` prefix.

    Returns:
        str: The decoded string.

    Raises:
        NotBasicError: If the basic prefix holds a non-ASCII character.
        InvalidInputError: If the digit stream is truncated or malformed, or
            yields a code point above U+10FFFF.
        PunycodeOverflowError: If a value would need integers wider than 32 bits.
    """
    output: list[int] = []
    input_length = len(text)
    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS

    basic = text.rfind(DELIMITER)
    if basic < 0:
        basic = 0

    for char in text[:basic]:
        if ord(char) >= 0x80:
            raise NotBasicError()
        output.append(ord(char))

    index = basic + 1 if basic > 0 else 0
    while index < input_length:
        old_i = i
        w = 1
        k = BASE
        while True:
            if index >= input_length:
                raise InvalidInputError()
            digit = basic_to_digit(ord(text[index]))
            index += 1
            if digit >= BASE:
                raise InvalidInputError()
            if digit > (MAX_INT - i) // w:
                raise PunycodeOverflowError()

            i += digit * w
            t = _threshold(k, bias)
            if digit < t:
                break

            base_minus_t = BASE - t
            if w > MAX_INT // base_minus_t:
                raise PunycodeOverflowError()
            w *= base_minus_t
            k += BASE

        out = len(output) + 1
        bias = adapt(i - old_i, out, old_i == 0)

        if i // out > MAX_INT - n:
            raise PunycodeOverflowError()

        n += i // out
        if n > MAX_CODE_POINT:
            raise InvalidInputError()

        i %= out
        output.insert(i, n)
        i += 1

    return ucs2_encode(output)
