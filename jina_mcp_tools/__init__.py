"""
jina-mcp-tools - Jina AI reader, search and fact-check tools over MCP

Usage:
    from jina_mcp_tools.jina import JinaClient
    from jina_mcp_tools.tool import ToolExecutor
    from jina_mcp_tools.tool.builtin import build_tools

    executor = ToolExecutor(build_tools(JinaClient(), tool_set="current"))
    result = await executor.aexecute("jina_reader", {"url": "https://example.com"})
    print(result.content)

Run as a server:
    jina-mcp-tools                       # MCP over stdio
    jina-mcp-tools --mode rest --port 9593 --endpoint /rest
"""

__version__ = "1.1.0"

__all__ = ["__version__"]
