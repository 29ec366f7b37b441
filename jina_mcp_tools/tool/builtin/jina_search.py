"""
Web search tools backed by Jina's search endpoint.

JinaSearchTool passes the endpoint's response through untouched.
LegacyJinaSearchTool keeps the older behaviour: results are trimmed to
`count` and rendered client-side as markdown, HTML or plain text.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from jina_mcp_tools.jina.models import SearchHit
from jina_mcp_tools.tool.builtin.jina_tool import JinaTool

ReturnFormat = Literal["markdown", "text", "html"]


class SearchParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    query: str = Field(min_length=1)
    # Accepted for interface compatibility; the endpoint decides how many
    # results to return.
    count: int = Field(default=5, gt=0)
    site_filter: str | None = Field(default=None, alias="siteFilter")


class LegacySearchParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    query: str = Field(min_length=1)
    count: int = 5
    return_format: ReturnFormat = Field(default="markdown", alias="returnFormat")


def _date_line(hit: SearchHit) -> str:
    return f"Date: {hit.date}" if hit.date else ""


def format_results(hits: list[SearchHit], return_format: ReturnFormat) -> str:
    if return_format == "markdown":
        return "\n".join(
            f"{i}. **{hit.title or 'Untitled'}**\n"
            f"   {hit.url or ''}\n"
            f"   {hit.description or ''}\n"
            f"   {_date_line(hit)}\n"
            for i, hit in enumerate(hits, 1)
        )
    if return_format == "html":
        items = "".join(
            f"<li><strong>{hit.title or 'Untitled'}</strong><br>\n"
            f"           <a href=\"{hit.url or ''}\">{hit.url or ''}</a><br>\n"
            f"           {hit.description or ''}<br>\n"
            f"           {_date_line(hit)}</li>"
            for hit in hits
        )
        return f"<ol>{items}</ol>"
    return "\n\n".join(
        f"{i}. {hit.title or 'Untitled'}\n"
        f"   {hit.url or ''}\n"
        f"   {hit.description or ''}\n"
        f"   {_date_line(hit)}"
        for i, hit in enumerate(hits, 1)
    )


class JinaSearchTool(JinaTool):
    params_model = SearchParams

    def get_name(self) -> str:
        return "jina_search"

    def get_description(self) -> str:
        return (
            "Search the web using Jina AI's search engine. Returns titles, URLs "
            "and descriptions of matching pages."
        )

    def get_parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Search query.",
                },
                "count": {
                    "type": "integer",
                    "minimum": 1,
                    "default": 5,
                    "description": "Number of search results to return.",
                },
                "siteFilter": {
                    "type": "string",
                    "description": "Restrict results to a domain, e.g. 'github.com'.",
                },
            },
            "required": ["query"],
        }

    async def run(self, params: SearchParams) -> tuple[str, Any]:
        text = await self.client.search(params.query, site_filter=params.site_filter)
        return text, text


class LegacyJinaSearchTool(JinaTool):
    params_model = LegacySearchParams

    def get_name(self) -> str:
        return "jina_search"

    def get_description(self) -> str:
        return "Search the web for information using Jina AI's semantic search engine"

    def get_parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Search query to find information on the web",
                },
                "count": {
                    "type": "integer",
                    "default": 5,
                    "description": "Number of search results to return",
                },
                "returnFormat": {
                    "type": "string",
                    "enum": ["markdown", "text", "html"],
                    "default": "markdown",
                    "description": "Format of the returned search results",
                },
            },
            "required": ["query"],
        }

    async def run(self, params: LegacySearchParams) -> tuple[str, Any]:
        payload = await self.client.search_results(params.query)
        hits = payload.hits
        if params.count > 0 and len(hits) > params.count:
            hits = hits[: params.count]
        # token usage is billing noise for the caller
        output = [hit.model_dump(exclude={"usage"}, exclude_none=True) for hit in hits]
        return format_results(hits, params.return_format), output
