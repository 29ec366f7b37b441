from jina_mcp_tools.server.mcp_server import ToolCallError, create_mcp_server, run_stdio
from jina_mcp_tools.server.rest import create_app, run_rest

__all__ = [
    "ToolCallError",
    "create_app",
    "create_mcp_server",
    "run_rest",
    "run_stdio",
]
