"""Label-wise Punycode conversion of domain names and email addresses."""

import re
from typing import Callable

from punynode.punycode import decode, encode

ACE_PREFIX = "xn--"

# Characters treated as label separators (RFC 3490 section 3.1)
LABEL_SEPARATORS = ("\x2e", "。", "．", "｡")

_REGEX_PUNYCODE = re.compile(r"^xn--", re.IGNORECASE)
_REGEX_NON_ASCII = re.compile(r"[^\x00-\x7f]")
_REGEX_SEPARATORS = re.compile(r"[\x2e。．｡]")


def map_domain(domain: str, callback: Callable[[str], str]) -> str:
    """Apply ``callback`` to every label of a domain name or email address.

    Only the first ``@`` splits an email address. The local part is returned
    unchanged and any further ``@`` is left in the domain part as it is.

    Args:
        domain: A domain name or an email address.
        callback: Function converting a single label.

    Returns:
        str: The converted domain name, labels joined with ``.``.
    """
    prefix = ""
    local, at, rest = domain.partition("@")
    if at:
        prefix = local + at
        domain = rest

    labels = _REGEX_SEPARATORS.sub(".", domain).split(".")
    return prefix + ".".join(callback(label) for label in labels)


def label_to_ascii(label: str) -> str:
    """Return the ACE form of ``label`` if it holds non-ASCII characters."""
    if _REGEX_NON_ASCII.search(label):
        return ACE_PREFIX + encode(label)
    return label


def label_to_unicode(label: str) -> str:
    """Decode ``label`` if it carries the ``xn--`` prefix (any case)."""
    if _REGEX_PUNYCODE.match(label):
        return decode(label[len(ACE_PREFIX):].lower())
    return label


def is_ace_label(label: str) -> bool:
    return bool(_REGEX_PUNYCODE.match(label))


def needs_encoding(label: str) -> bool:
    return bool(_REGEX_NON_ASCII.search(label))


def to_ascii(domain: str) -> str:
    """Convert a Unicode domain name or email address to its Punycode form.

    Labels that are already ASCII, including ``xn--`` labels, are left alone.

    Args:
        domain (str): The Unicode domain name or email address.

    Returns:
        str: The ASCII-compatible representation.
    """
    return map_domain(domain, label_to_ascii)


def to_unicode(domain: str) -> str:
    """Convert a Punycode domain name or email address to Unicode.

    Only labels starting with ``xn--`` are decoded.

    Args:
        domain (str): The Punycode domain name or email address.

    Returns:
        str: The Unicode representation.
    """
    return map_domain(domain, label_to_unicode)
