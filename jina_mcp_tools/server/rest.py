"""
MCP over plain HTTP: JSON-RPC 2.0 requests POSTed to a single endpoint.

Supported methods: initialize, ping, tools/list, tools/call. Requests
without an id are notifications and are acknowledged with 202.
"""

from typing import Any

import uvicorn
from fastapi import FastAPI, Response
from mcp.types import LATEST_PROTOCOL_VERSION
from pydantic import BaseModel, Field

from jina_mcp_tools import __version__
from jina_mcp_tools.config.settings import JinaMcpSettings
from jina_mcp_tools.server.mcp_server import SERVER_INSTRUCTIONS, SERVER_NAME
from jina_mcp_tools.tool.executor import ToolExecutor
from jina_mcp_tools.utils.logging import get_logger

logger = get_logger(__name__)

METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


class JsonRpcRequest(BaseModel):
    jsonrpc: str = "2.0"
    id: int | str | None = None
    method: str
    params: dict[str, Any] = Field(default_factory=dict)


def _result(request_id: int | str | None, result: dict[str, Any]) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def _error(request_id: int | str | None, code: int, message: str) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}


def create_app(executor: ToolExecutor, endpoint: str = "/rest") -> FastAPI:
    app = FastAPI(
        title="Jina MCP Tools",
        description=SERVER_INSTRUCTIONS,
        version=__version__,
    )

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": SERVER_NAME}

    @app.post(endpoint)
    async def json_rpc(request: JsonRpcRequest):
        if request.id is None:
            logger.debug("jsonrpc_notification", method=request.method)
            return Response(status_code=202)

        if request.method == "initialize":
            return _result(
                request.id,
                {
                    "protocolVersion": LATEST_PROTOCOL_VERSION,
                    "capabilities": {"tools": {"listChanged": False}},
                    "serverInfo": {"name": SERVER_NAME, "version": __version__},
                    "instructions": SERVER_INSTRUCTIONS,
                },
            )

        if request.method == "ping":
            return _result(request.id, {})

        if request.method == "tools/list":
            tools = [
                {
                    "name": d.name,
                    "description": d.description,
                    "inputSchema": d.parameters,
                }
                for d in executor.definitions()
            ]
            return _result(request.id, {"tools": tools})

        if request.method == "tools/call":
            tool_name = request.params.get("name")
            if not tool_name:
                return _error(request.id, INVALID_PARAMS, "Missing tool name")
            result = await executor.aexecute(tool_name, request.params.get("arguments") or {})
            return _result(request.id, result.to_protocol())

        return _error(request.id, METHOD_NOT_FOUND, f"Method '{request.method}' not found")

    return app


async def run_rest(executor: ToolExecutor, settings: JinaMcpSettings) -> None:
    """Serve the JSON-RPC endpoint with uvicorn until shutdown."""
    app = create_app(executor, endpoint=settings.endpoint)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    logger.info(
        "rest_transport_starting",
        host=settings.host,
        port=settings.port,
        endpoint=settings.endpoint,
    )
    await uvicorn.Server(config).serve()
