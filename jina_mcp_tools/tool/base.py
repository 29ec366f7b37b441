from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
import time


@dataclass
class ToolDefinition:
    """Tool definition for protocol-facing registration."""

    name: str
    description: str
    parameters: dict[str, Any]


@dataclass
class ToolResult:
    """Result of a tool execution"""

    tool_name: str
    input_args: dict[str, Any]
    content: str  # Single text segment returned to the caller
    output: Any  # Raw execution result
    start_time: float
    end_time: float
    duration: float
    error: str | None = None
    is_success: bool = True

    @classmethod
    def success(
        cls,
        tool_name: str,
        content: str,
        input_args: dict[str, Any] | None = None,
        output: Any = None,
        start_time: float | None = None,
    ) -> "ToolResult":
        now = time.time()
        start = start_time if start_time is not None else now
        return cls(
            tool_name=tool_name,
            input_args=input_args or {},
            content=content,
            output=output if output is not None else content,
            start_time=start,
            end_time=now,
            duration=now - start,
        )

    @classmethod
    def failure(
        cls,
        tool_name: str,
        error: str,
        input_args: dict[str, Any] | None = None,
        start_time: float | None = None,
    ) -> "ToolResult":
        """Create a ToolResult representing an error."""
        now = time.time()
        start = start_time if start_time is not None else now
        return cls(
            tool_name=tool_name,
            input_args=input_args or {},
            content=f"Error: {error}",
            output=None,
            error=error,
            start_time=start,
            end_time=now,
            duration=now - start,
            is_success=False,
        )

    def to_protocol(self) -> dict[str, Any]:
        """Render as an MCP `CallToolResult` payload."""
        return {
            "content": [{"type": "text", "text": self.content}],
            "isError": not self.is_success,
        }


class BaseTool(ABC):
    """Common interface that every concrete tool must implement."""

    def __init__(self) -> None:
        self.name = self.get_name()
        self.description = self.get_description()

    @abstractmethod
    def get_name(self) -> str:
        """Return the tool name."""

    @abstractmethod
    def get_description(self) -> str:
        """Return the tool description shown to callers."""

    @abstractmethod
    def get_parameters(self) -> dict[str, Any]:
        """Return the JSON schema describing `execute` parameters."""

    @abstractmethod
    async def execute(self, parameters: dict[str, Any]) -> ToolResult:
        """
        Execute the tool and return ToolResult directly.

        Implementations never raise for per-call failures; they are folded
        into a ToolResult with is_success=False.

        Args:
            parameters: Tool arguments as received from the caller

        Returns:
            ToolResult: Tool execution result
        """

    def get_definition(self) -> ToolDefinition:
        """Construct a `ToolDefinition` for protocol-facing registration."""
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.get_parameters(),
        )
