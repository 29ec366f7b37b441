"""
JinaReaderTool: read a web page through the Jina reader API.
"""

from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jina_mcp_tools.jina.headers import ExtractionMode, OutputFormat
from jina_mcp_tools.tool.builtin.jina_tool import JinaTool


class ReaderParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    url: str
    mode: ExtractionMode = "standard"
    output_format: OutputFormat = Field(default="markdown", alias="format")
    custom_timeout: int | None = Field(default=None, alias="customTimeout", gt=0)

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("must be an absolute URL")
        return value


class JinaReaderTool(JinaTool):
    params_model = ReaderParams

    def get_name(self) -> str:
        return "jina_reader"

    def get_description(self) -> str:
        return (
            "Read and extract content from a web page using Jina AI's reader. "
            "GitHub file URLs (github.com/<owner>/<repo>/blob/...) are fetched "
            "directly as raw text; mode and format do not apply to them."
        )

    def get_parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "format": "uri",
                    "description": "URL of the web page to read.",
                },
                "mode": {
                    "type": "string",
                    "enum": ["standard", "comprehensive", "clean_content"],
                    "default": "standard",
                    "description": (
                        "Extraction mode: 'standard' (fast, direct fetch), "
                        "'comprehensive' (browser rendering with link and image "
                        "summaries), 'clean_content' (browser rendering, main "
                        "content only, navigation and ads removed)."
                    ),
                },
                "format": {
                    "type": "string",
                    "enum": ["default", "markdown", "text", "structured"],
                    "default": "markdown",
                    "description": (
                        "Output format: 'default' (reader's native format), "
                        "'markdown', 'text', or 'structured' (markdown with "
                        "link and image summaries)."
                    ),
                },
                "customTimeout": {
                    "type": "integer",
                    "minimum": 1,
                    "description": "Override the mode's page load timeout, in seconds.",
                },
            },
            "required": ["url"],
        }

    async def run(self, params: ReaderParams) -> tuple[str, Any]:
        content = await self.client.read(
            params.url,
            mode=params.mode,
            output_format=params.output_format,
            custom_timeout=params.custom_timeout,
        )
        return content, content
