"""
Command line entry point.

    jina-mcp-tools [--mode stdio|rest] [--port N] [--endpoint PATH] ...

Flags override JINA_MCP_* environment settings. Startup or transport
failures are logged to stderr and exit with status 1; failures inside a
single tool call never reach this level.
"""

import argparse
import asyncio
import sys

from jina_mcp_tools import __version__
from jina_mcp_tools.config.settings import JinaMcpSettings, settings as default_settings
from jina_mcp_tools.jina.client import JinaClient
from jina_mcp_tools.jina.credentials import resolve_credential
from jina_mcp_tools.server.mcp_server import create_mcp_server, run_stdio
from jina_mcp_tools.server.rest import run_rest
from jina_mcp_tools.tool.builtin import build_tools
from jina_mcp_tools.tool.executor import ToolExecutor
from jina_mcp_tools.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

MIN_API_KEY_LENGTH = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jina-mcp-tools",
        description="Jina AI reader, search and fact-check tools as an MCP server",
    )
    parser.add_argument("--mode", choices=["stdio", "rest"], help="transport (default: stdio)")
    parser.add_argument("--host", help="REST bind host")
    parser.add_argument("--port", type=int, help="REST port (default: 9593)")
    parser.add_argument("--endpoint", help="REST JSON-RPC path (default: /rest)")
    parser.add_argument("--tool-set", choices=["current", "legacy"], help="tool surface to expose")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def resolve_settings(
    args: argparse.Namespace, base: JinaMcpSettings | None = None
) -> JinaMcpSettings:
    """Apply CLI flags on top of the environment settings."""
    overrides = {
        key: value
        for key, value in vars(args).items()
        if value is not None
    }
    base = base or default_settings
    return JinaMcpSettings.model_validate({**base.model_dump(), **overrides})


def log_credential_status() -> None:
    api_key = resolve_credential()
    if api_key is None:
        logger.info("jina_api_key_missing", detail="Some features may be limited")
        return
    logger.info("jina_api_key_found", key_length=len(api_key))
    if len(api_key) < MIN_API_KEY_LENGTH:
        logger.warning("jina_api_key_suspiciously_short", key_length=len(api_key))


async def serve(settings: JinaMcpSettings) -> None:
    client = JinaClient.from_settings(settings)
    executor = ToolExecutor(build_tools(client, tool_set=settings.tool_set))
    logger.info(
        "server_starting",
        mode=settings.mode,
        tool_set=settings.tool_set,
        tools=[d.name for d in executor.definitions()],
    )
    if settings.mode == "rest":
        await run_rest(executor, settings)
        return
    await run_stdio(create_mcp_server(executor))


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValueError as e:
        configure_logging()
        logger.error("invalid_configuration", error=str(e))
        sys.exit(1)

    configure_logging(settings.log_level, settings.log_json)
    log_credential_status()

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("server_stopped")
    except Exception as e:
        logger.critical("server_fatal_error", error=str(e), exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
