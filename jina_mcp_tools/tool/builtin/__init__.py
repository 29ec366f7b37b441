"""
Builtin Jina tools and the tool sets they are served in.

The tool list is built once at startup and handed to a transport; there is
no module-level registry to mutate.

current: jina_reader, jina_search (raw pass-through)
legacy:  jina_reader, jina_search (client-side formatting), jina_fact_check
"""

from typing import Literal, Type

from jina_mcp_tools.jina.client import JinaClient
from jina_mcp_tools.tool.builtin.jina_fact_check import JinaFactCheckTool
from jina_mcp_tools.tool.builtin.jina_reader import JinaReaderTool
from jina_mcp_tools.tool.builtin.jina_search import JinaSearchTool, LegacyJinaSearchTool
from jina_mcp_tools.tool.builtin.jina_tool import JinaTool

ToolSet = Literal["current", "legacy"]

TOOL_SETS: dict[str, tuple[Type[JinaTool], ...]] = {
    "current": (JinaReaderTool, JinaSearchTool),
    "legacy": (JinaReaderTool, LegacyJinaSearchTool, JinaFactCheckTool),
}


def build_tools(client: JinaClient, tool_set: ToolSet = "current") -> list[JinaTool]:
    """Instantiate every tool of `tool_set` against a shared client."""
    try:
        classes = TOOL_SETS[tool_set]
    except KeyError:
        raise ValueError(f"Unknown tool set: {tool_set}") from None
    return [cls(client) for cls in classes]


__all__ = [
    "TOOL_SETS",
    "ToolSet",
    "build_tools",
    "JinaReaderTool",
    "JinaSearchTool",
    "LegacyJinaSearchTool",
    "JinaFactCheckTool",
]
