"""Resource Mixin classes for PunycodeMCPServer to separate concerns."""

from typing import Any

from punynode import punycode
from punynode.domain import ACE_PREFIX, LABEL_SEPARATORS
from punynode.typedefs import ToolResult


def bootstring_parameters() -> dict[str, Any]:
    """Return the RFC 3492 parameters the codec runs with."""
    return {
        "base": punycode.BASE,
        "tmin": punycode.T_MIN,
        "tmax": punycode.T_MAX,
        "skew": punycode.SKEW,
        "damp": punycode.DAMP,
        "initial_bias": punycode.INITIAL_BIAS,
        "initial_n": punycode.INITIAL_N,
        "delimiter": punycode.DELIMITER,
        "max_int": punycode.MAX_INT,
    }


def label_separators() -> dict[str, Any]:
    """Return the label separators and the ACE prefix."""
    return {
        "separators": [f"U+{ord(sep):04X}" for sep in LABEL_SEPARATORS],
        "ace_prefix": ACE_PREFIX,
    }


class ResourceRegistrationMixin:
    """Mixin for registering resources with the MCP server.

    Note: This mixin assumes the class has a 'server' (FastMCP) attribute available
    when registration methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance

    def register_codec_resources(self) -> None:
        """Register codec resources such as the Bootstring parameters."""

        @self.server.resource(
            uri="resource://bootstring_parameters",
            name="bootstring_parameters",
            description="The RFC 3492 Bootstring parameters used for Punycode.",
        )
        async def get_bootstring_parameters() -> ToolResult:
            return ToolResult(success=True, output=bootstring_parameters())

        @self.server.resource(
            uri="resource://label_separators",
            name="label_separators",
            description="Characters that separate domain labels, and the ACE prefix.",
        )
        async def get_label_separators() -> ToolResult:
            return ToolResult(success=True, output=label_separators())
