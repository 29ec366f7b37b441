import asyncio
from typing import Any
import time

import structlog

from jina_mcp_tools.tool.base import BaseTool, ToolDefinition, ToolResult
from jina_mcp_tools.utils.logging import get_logger

logger = get_logger(__name__)


class ToolExecutor:
    """
    ToolExecutor dispatches tool calls by name and returns ToolResult.

    It is the single boundary transports talk to: unknown tools, bad
    arguments and unexpected exceptions all come back as error results.
    """

    def __init__(self, tools: list[BaseTool]):
        self.tools = list(tools)
        self.tools_map = {t.get_name(): t for t in self.tools}
        if len(self.tools_map) != len(self.tools):
            raise ValueError("Duplicate tool names in tool list")

    def definitions(self) -> list[ToolDefinition]:
        return [t.get_definition() for t in self.tools]

    async def aexecute(
        self,
        tool_name: str | None,
        arguments: dict[str, Any] | None = None,
    ) -> ToolResult:
        start_time = time.time()
        args = arguments if arguments is not None else {}

        if not tool_name:
            return ToolResult.failure(
                tool_name="unknown",
                error="Tool name missing in tool call",
                start_time=start_time,
            )

        tool = self.tools_map.get(tool_name)
        if not tool:
            return ToolResult.failure(
                tool_name=tool_name,
                error=f"Tool {tool_name} not found",
                start_time=start_time,
            )

        if not isinstance(args, dict):
            return ToolResult.failure(
                tool_name=tool_name,
                error="Tool arguments must be an object",
                start_time=start_time,
            )

        with structlog.contextvars.bound_contextvars(tool_name=tool_name):
            try:
                logger.debug("executing_tool")
                result = await tool.execute(args)
                logger.info(
                    "tool_execution_completed",
                    success=result.is_success,
                    duration=round(result.duration, 3),
                )
                return result
            except asyncio.CancelledError:
                logger.info("tool_execution_cancelled")
                raise
            except Exception as e:
                logger.error("tool_execution_exception", error=str(e), exc_info=True)
                return ToolResult.failure(
                    tool_name=tool_name,
                    error=f"Tool execution failed: {e}",
                    input_args=args,
                    start_time=start_time,
                )
