"""Punycode (RFC 3492) and IDNA label conversion for domain names and emails."""

from punynode.domain import map_domain, to_ascii, to_unicode
from punynode.exceptions import (
    ErrorKind,
    InvalidCodePointError,
    InvalidInputError,
    NotBasicError,
    PunycodeError,
    PunycodeOverflowError,
)
from punynode.punycode import decode, encode
from punynode.ucs2 import ucs2, ucs2_decode, ucs2_encode

__version__ = "0.1.0"

# camelCase names of the JavaScript API
toASCII = to_ascii
toUnicode = to_unicode
ucs2Encode = ucs2_encode
ucs2Decode = ucs2_decode

__all__ = [
    "ErrorKind",
    "InvalidCodePointError",
    "InvalidInputError",
    "NotBasicError",
    "PunycodeError",
    "PunycodeOverflowError",
    "decode",
    "encode",
    "map_domain",
    "toASCII",
    "toUnicode",
    "to_ascii",
    "to_unicode",
    "ucs2",
    "ucs2Decode",
    "ucs2Encode",
    "ucs2_decode",
    "ucs2_encode",
]
