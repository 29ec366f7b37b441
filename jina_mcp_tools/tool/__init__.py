from jina_mcp_tools.tool.base import BaseTool, ToolDefinition, ToolResult
from jina_mcp_tools.tool.executor import ToolExecutor

__all__ = [
    "BaseTool",
    "ToolDefinition",
    "ToolExecutor",
    "ToolResult",
]
