"""
Global settings from environment variables.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JinaMcpSettings(BaseSettings):
    """
    Server configuration loaded from environment variables.

    Environment variables should be prefixed with JINA_MCP_
    Example: JINA_MCP_MODE=rest, JINA_MCP_PORT=9593

    The Jina API key is deliberately not part of the settings: it is read from
    JINA_API_KEY on every tool call (see jina_mcp_tools.jina.credentials).
    """

    model_config = SettingsConfigDict(
        env_prefix="JINA_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Transport
    mode: Literal["stdio", "rest"] = "stdio"
    host: str = "0.0.0.0"
    port: int = Field(default=9593, gt=0, lt=65536)
    endpoint: str = "/rest"

    # Tool surface: "current" = reader + search, "legacy" adds fact-check
    # and client-side search formatting
    tool_set: Literal["current", "legacy"] = "current"

    # Remote endpoints
    reader_url: str = "https://r.jina.ai/"
    search_url: str = "https://s.jina.ai/"
    fact_check_url: str = "https://g.jina.ai/"

    # None leaves requests unbounded on the client side
    http_timeout: float | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False


# Global settings instance (singleton)
settings = JinaMcpSettings()


__all__ = ["JinaMcpSettings", "settings"]
