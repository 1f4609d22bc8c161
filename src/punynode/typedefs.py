"""Type definitions for the Punycode MCP tool layer.

This module provides the structured result types returned by the tool
implementations. They keep the shape of tool output consistent for API consumers
regardless of which conversion was requested.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict


@dataclass
class ToolResult:
    """Stores the result of a conversion tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


class LabelReport(TypedDict):
    """A TypedDict describing one label of an inspected domain name.

    Attributes:
        label (str): The label as it appeared in the input (after separator mapping).
        ascii (str): The ASCII-compatible form of the label.
        unicode (str): The Unicode form of the label.
        is_ace (bool): Whether the input label carries the ``xn--`` prefix.
        needs_encoding (bool): Whether the input label holds non-ASCII characters.
    """

    label: str
    ascii: str
    unicode: str
    is_ace: bool
    needs_encoding: bool
