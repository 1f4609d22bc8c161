"""Exception types and error processing for Punycode operations.

This module defines the error kinds raised by the Bootstring codec and the UCS-2
helpers, together with a utility that turns those exceptions into user-friendly
messages for the MCP tool layer.

The module serves three main purposes:
1. Define one exception type per error kind, all rooted at PunycodeError
2. Keep the canonical error message table in one place
3. Map codec exceptions (and stray Unicode errors) to human-readable messages

Note: PunycodeError subclasses ValueError so callers that only care about
"malformed input" can catch the built-in type.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """The kinds of failure a codec call can end with."""

    OVERFLOW = "overflow"
    NOT_BASIC = "not-basic"
    INVALID_INPUT = "invalid-input"
    INVALID_CODE_POINT = "invalid-code-point"


ERROR_MESSAGES = {
    ErrorKind.OVERFLOW: "Overflow: input needs wider integers to process",
    ErrorKind.NOT_BASIC: "Illegal input >= 0x80 (not a basic code point)",
    ErrorKind.INVALID_INPUT: "Invalid input",
    ErrorKind.INVALID_CODE_POINT: "Code point outside the Unicode range 0..0x10FFFF",
}


class PunycodeError(ValueError):
    """Base exception for Punycode encoding and decoding errors."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or ERROR_MESSAGES[self.kind])


class PunycodeOverflowError(PunycodeError):
    """An intermediate value would not fit in a signed 32-bit integer."""

    kind = ErrorKind.OVERFLOW


class NotBasicError(PunycodeError):
    """The basic prefix of an encoded string holds a code point >= 0x80."""

    kind = ErrorKind.NOT_BASIC


class InvalidInputError(PunycodeError):
    """The digit stream of an encoded string is truncated or malformed."""

    kind = ErrorKind.INVALID_INPUT


class InvalidCodePointError(PunycodeError):
    """A value handed to the UCS-2 encoder is not a Unicode code point."""

    kind = ErrorKind.INVALID_CODE_POINT


def handle_punycode_error(error: Exception) -> str:
    """Convert Punycode-related exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, UnicodeError):
        err_str = f"Unicode error: {str(error)}"
    if isinstance(error, PunycodeOverflowError):
        err_str = "Input is too large to encode (integer overflow)"
    if isinstance(error, NotBasicError):
        err_str = "Encoded label contains non-ASCII characters before the delimiter"
    if isinstance(error, InvalidInputError):
        err_str = "Encoded label is truncated or contains invalid digits"
    if isinstance(error, InvalidCodePointError):
        err_str = f"Invalid code point: {str(error)}"
    return err_str
