"""
Prompt Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any


class PromptRegistrationMixin:
    """Mixin for registering prompts with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools_prompts() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools_prompts(self) -> None:
        """Register prompts for tools with the server."""

        @self.server.prompt(
            name="punycode_converter",
            description="Return the punycode version of an internationalized domain name (IDN).",
            tags=set(("idn", "punycode", "converter")),
            enabled=True,
        )
        def punycode_converter(domain: str) -> str:
            """Convert IDN domain name to punycode."""
            return (
                f"Convert the domain {domain} to punycode format using the idn_to_ascii"
                " tool provided by the Punycode MCP Server."
            )

        @self.server.prompt(
            name="unicode_converter",
            description="Return the Unicode version of a punycode (xn--) domain name.",
            tags=set(("idn", "punycode", "converter")),
            enabled=True,
        )
        def unicode_converter(domain: str) -> str:
            """Convert punycode domain name to Unicode."""
            return (
                f"Convert the domain {domain} to Unicode using the idn_to_unicode"
                " tool provided by the Punycode MCP Server."
            )

        @self.server.prompt(
            name="explain_domain_labels",
            description="Explain how each label of a domain name is encoded.",
            tags=set(("idn", "punycode", "labels")),
            enabled=True,
        )
        def explain_domain_labels(domain: str) -> str:
            """Explain the labels of a domain name."""
            return (
                f"Inspect the labels of {domain} with the inspect_domain tool and explain"
                " which labels are punycode encoded and what they decode to."
            )

        @self.server.prompt(
            name="raw_punycode",
            description="Encode or decode a raw Punycode string without label handling.",
            tags=set(("punycode", "bootstring")),
            enabled=self.config.get("features", {}).get("raw_codec", False),
        )
        def raw_punycode(text: str) -> str:
            """Run the raw Punycode codec."""
            return (
                f"Use the punycode_encode or punycode_decode tool to convert `{text}`."
                " Decode if it is plain ASCII, otherwise encode."
            )
