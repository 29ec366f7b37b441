"""
Shared execution flow for the Jina-backed tools.

Subclasses declare a pydantic parameter model and implement `run`; this
class validates arguments, calls `run` and folds every failure into an
error ToolResult.
"""

import time
from abc import abstractmethod
from typing import Any

from pydantic import BaseModel, ValidationError

from jina_mcp_tools.jina.client import JinaClient
from jina_mcp_tools.tool.base import BaseTool, ToolResult
from jina_mcp_tools.utils.logging import get_logger

logger = get_logger(__name__)


def format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class JinaTool(BaseTool):
    params_model: type[BaseModel]

    def __init__(self, client: JinaClient) -> None:
        self.client = client
        super().__init__()

    @abstractmethod
    async def run(self, params: Any) -> tuple[str, Any]:
        """Perform the call; returns (text content, raw output)."""

    async def execute(self, parameters: dict[str, Any]) -> ToolResult:
        start = time.time()
        try:
            params = self.params_model.model_validate(parameters)
        except ValidationError as e:
            return ToolResult.failure(
                tool_name=self.name,
                error=f"Invalid parameters: {format_validation_error(e)}",
                input_args=parameters,
                start_time=start,
            )

        try:
            content, output = await self.run(params)
        except Exception as e:
            logger.warning(
                "jina_tool_failed",
                tool_name=self.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            return ToolResult.failure(
                tool_name=self.name,
                error=str(e) or type(e).__name__,
                input_args=parameters,
                start_time=start,
            )

        return ToolResult.success(
            tool_name=self.name,
            content=content,
            input_args=parameters,
            output=output,
            start_time=start,
        )
