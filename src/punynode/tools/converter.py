from fastmcp.utilities.logging import get_logger

from punynode.domain import (
    is_ace_label,
    label_to_ascii,
    label_to_unicode,
    map_domain,
    needs_encoding,
    to_ascii,
    to_unicode,
)
from punynode.exceptions import PunycodeError, handle_punycode_error
from punynode.punycode import decode, encode
from punynode.typedefs import LabelReport, ToolResult
from punynode.ucs2 import ucs2_decode, ucs2_encode

logger = get_logger(__name__)


def _failure(operation: str, value: object, error: Exception) -> ToolResult:
    logger.warning("%s failed for %r: %s", operation, value, error)
    details = {"input": value}
    if isinstance(error, PunycodeError):
        details["kind"] = error.kind.value
    return ToolResult(success=False, error=handle_punycode_error(error), details=details)


def _email_rejected(domain: str, allow_email: bool) -> ToolResult | None:
    if not allow_email and "@" in domain:
        return ToolResult(
            success=False,
            error="Email addresses are not accepted by this server",
            details={"input": domain},
        )
    return None


async def to_ascii_impl(domain: str, allow_email: bool = True) -> ToolResult:
    """Convert a Unicode IDN domain name or email address into punycode ASCII format.

    Args:
        domain (str): The domain name or email address to convert.
        allow_email (bool): Whether input of the form ``user@domain`` is accepted.

    Returns:
        ToolResult: Punycode domain name or error details.
    """
    domain = domain.strip()
    rejected = _email_rejected(domain, allow_email)
    if rejected:
        return rejected
    try:
        ascii_domain = to_ascii(domain)
    except PunycodeError as e:
        return _failure("to_ascii", domain, e)
    logger.debug("Converted %r to %r", domain, ascii_domain)
    return ToolResult(success=True, output={"domain": domain, "ascii": ascii_domain})


async def to_unicode_impl(domain: str, allow_email: bool = True) -> ToolResult:
    """Convert a punycode domain name or email address back into Unicode.

    Args:
        domain (str): The domain name or email address to convert.
        allow_email (bool): Whether input of the form ``user@domain`` is accepted.

    Returns:
        ToolResult: Unicode domain name or error details.
    """
    domain = domain.strip()
    rejected = _email_rejected(domain, allow_email)
    if rejected:
        return rejected
    try:
        unicode_domain = to_unicode(domain)
    except PunycodeError as e:
        return _failure("to_unicode", domain, e)
    logger.debug("Converted %r to %r", domain, unicode_domain)
    return ToolResult(success=True, output={"domain": domain, "unicode": unicode_domain})


async def punycode_encode_impl(text: str) -> ToolResult:
    """Encode a single string with raw Punycode (no ``xn--`` prefix, no label split)."""
    try:
        punycode = encode(text)
    except PunycodeError as e:
        return _failure("encode", text, e)
    return ToolResult(success=True, output={"input": text, "punycode": punycode})


async def punycode_decode_impl(text: str) -> ToolResult:
    """Decode a single raw Punycode string (without ``xn--`` prefix)."""
    text = text.strip()
    try:
        decoded = decode(text)
    except PunycodeError as e:
        return _failure("decode", text, e)
    return ToolResult(success=True, output={"input": text, "text": decoded})


async def ucs2_decode_impl(text: str) -> ToolResult:
    """List the Unicode code points of a string."""
    code_points = ucs2_decode(text)
    return ToolResult(
        success=True,
        output={
            "input": text,
            "code_points": code_points,
            "hex": [f"U+{cp:04X}" for cp in code_points],
        },
    )


async def ucs2_encode_impl(code_points: list[int]) -> ToolResult:
    """Build a string from a list of Unicode code points."""
    try:
        text = ucs2_encode(code_points)
    except PunycodeError as e:
        return _failure("ucs2_encode", code_points, e)
    return ToolResult(success=True, output={"code_points": code_points, "text": text})


async def inspect_domain_impl(domain: str) -> ToolResult:
    """Break a domain name or email address down into per-label conversions.

    Args:
        domain (str): The domain name or email address to inspect.

    Returns:
        ToolResult: A list of label reports, one per domain label.
    """
    domain = domain.strip()
    reports: list[LabelReport] = []

    def _inspect(label: str) -> str:
        reports.append(
            LabelReport(
                label=label,
                ascii=label_to_ascii(label),
                unicode=label_to_unicode(label),
                is_ace=is_ace_label(label),
                needs_encoding=needs_encoding(label),
            )
        )
        return label

    try:
        map_domain(domain, _inspect)
    except PunycodeError as e:
        return _failure("inspect", domain, e)
    return ToolResult(
        success=True,
        output=[dict(report) for report in reports],
        details={"domain": domain, "label_count": len(reports)},
    )
