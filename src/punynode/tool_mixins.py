"""
Tool Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from punynode.tools import (
    inspect_domain_impl,
    punycode_decode_impl,
    punycode_encode_impl,
    to_ascii_impl,
    to_unicode_impl,
    ucs2_decode_impl,
    ucs2_encode_impl,
)
from punynode.typedefs import ToolResult


class ToolRegistrationMixin:
    """Mixin for registering conversion tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def feature_enabled(self, name: str, default: bool = False) -> bool:
        """Return the value of a boolean flag from the ``features`` config section."""
        return bool(self.config.get("features", {}).get(name, default))

    def register_tools(self) -> None:
        """Register all Punycode-related tools with the MCP server."""
        allow_email = self.feature_enabled("email_addresses", True)

        @self.server.tool(
            name="idn_to_ascii",
            description=(
                "Use this tool to convert an internationalized domain name or email"
                " address into its ASCII-compatible punycode form (xn-- labels)"
            ),
            tags=set(("idn", "punycode", "converter", "ascii")),
            enabled=True,
        )
        async def idn_to_ascii(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing punycode conversion for domain `{domain}`.")
            return await to_ascii_impl(domain, allow_email=allow_email)

        @self.server.tool(
            name="idn_to_unicode",
            description=(
                "Use this tool to convert a punycode (xn--) domain name or email"
                " address back into its Unicode form"
            ),
            tags=set(("idn", "punycode", "converter", "unicode")),
            enabled=True,
        )
        async def idn_to_unicode(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing Unicode conversion for domain `{domain}`.")
            return await to_unicode_impl(domain, allow_email=allow_email)

        @self.server.tool(
            name="inspect_domain",
            description=(
                "Show the ASCII and Unicode form of every label of a domain name"
                " and whether each label is punycode encoded"
            ),
            tags=set(("idn", "punycode", "labels", "diagnostics")),
            enabled=True,
        )
        async def inspect_domain(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Inspecting labels of `{domain}`.")
            return await inspect_domain_impl(domain)

        @self.server.tool(
            name="punycode_encode",
            description=(
                "Encode a single string with raw Punycode (RFC 3492), without the"
                " xn-- prefix and without splitting it into labels"
            ),
            tags=set(("punycode", "bootstring", "encode")),
            enabled=self.feature_enabled("raw_codec"),
        )
        async def punycode_encode(text: str, ctx: Context) -> ToolResult:
            await ctx.info("Encoding text with raw Punycode.")
            return await punycode_encode_impl(text)

        @self.server.tool(
            name="punycode_decode",
            description=(
                "Decode a single raw Punycode string (RFC 3492) that has no xn-- prefix"
            ),
            tags=set(("punycode", "bootstring", "decode")),
            enabled=self.feature_enabled("raw_codec"),
        )
        async def punycode_decode(text: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding raw Punycode `{text}`.")
            return await punycode_decode_impl(text)

        @self.server.tool(
            name="ucs2_decode",
            description="List the Unicode code points of a string",
            tags=set(("unicode", "code_points")),
            enabled=self.feature_enabled("ucs2_tools"),
        )
        async def ucs2_decode(text: str, ctx: Context) -> ToolResult:
            await ctx.info("Listing code points.")
            return await ucs2_decode_impl(text)

        @self.server.tool(
            name="ucs2_encode",
            description="Build a string from a list of Unicode code points",
            tags=set(("unicode", "code_points")),
            enabled=self.feature_enabled("ucs2_tools"),
        )
        async def ucs2_encode(code_points: list[int], ctx: Context) -> ToolResult:
            await ctx.info(f"Building a string from {len(code_points)} code points.")
            return await ucs2_encode_impl(code_points)
