"""
MCP server over stdio.

The low-level `mcp` Server is built from an explicit ToolExecutor: tool
definitions are listed straight from it and every call is dispatched
through it. Error results are raised as ToolCallError, which the SDK turns
into a CallToolResult with isError set.
"""

from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from jina_mcp_tools import __version__
from jina_mcp_tools.tool.executor import ToolExecutor
from jina_mcp_tools.utils.logging import get_logger

logger = get_logger(__name__)

SERVER_NAME = "jina-mcp-tools"
SERVER_INSTRUCTIONS = "Jina AI tools for web reading, search, and fact-checking"


class ToolCallError(Exception):
    """Carries an error result's text out of the call_tool handler."""

    pass


def create_mcp_server(executor: ToolExecutor) -> Server:
    server = Server(SERVER_NAME, version=__version__, instructions=SERVER_INSTRUCTIONS)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=definition.name,
                description=definition.description,
                inputSchema=definition.parameters,
            )
            for definition in executor.definitions()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await executor.aexecute(name, arguments or {})
        if not result.is_success:
            raise ToolCallError(result.content)
        return [types.TextContent(type="text", text=result.content)]

    return server


async def run_stdio(server: Server) -> None:
    """Serve `server` on stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("stdio_transport_connected", server=SERVER_NAME)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
