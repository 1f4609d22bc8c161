"""Tools related submodule to keep all things tool related in one place."""

from .converter import (
    inspect_domain_impl,
    punycode_decode_impl,
    punycode_encode_impl,
    to_ascii_impl,
    to_unicode_impl,
    ucs2_decode_impl,
    ucs2_encode_impl,
)

__all__ = [
    "inspect_domain_impl",
    "punycode_decode_impl",
    "punycode_encode_impl",
    "to_ascii_impl",
    "to_unicode_impl",
    "ucs2_decode_impl",
    "ucs2_encode_impl",
]
