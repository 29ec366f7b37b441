"""
JinaClient: one HTTP call per operation against the Jina AI endpoints.

Reader:     POST https://r.jina.ai/   {"url": ...}
Search:     GET  https://s.jina.ai/?q=...
Fact-check: POST https://g.jina.ai/   {"statement": ..., "deepdive": ...}

GitHub blob URLs handed to the reader are fetched directly from the raw
content host instead (see jina_mcp_tools.jina.github).

Non-2xx answers raise RemoteHttpError; transport failures surface as
httpx.HTTPError and malformed bodies as ValueError. Callers decide how to
present them.
"""

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from jina_mcp_tools.config.settings import JinaMcpSettings
from jina_mcp_tools.jina.errors import RemoteHttpError
from jina_mcp_tools.jina.github import classify_url
from jina_mcp_tools.jina.headers import (
    ExtractionMode,
    OutputFormat,
    build_fact_check_headers,
    build_reader_headers,
    build_search_headers,
)
from jina_mcp_tools.jina.models import ReaderPayload, SearchPayload
from jina_mcp_tools.utils.logging import get_logger
from jina_mcp_tools.utils.tojson import from_json, to_json

logger = get_logger(__name__)

DEFAULT_READER_URL = "https://r.jina.ai/"
DEFAULT_SEARCH_URL = "https://s.jina.ai/"
DEFAULT_FACT_CHECK_URL = "https://g.jina.ai/"


@dataclass
class RemoteResponse:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self, api_name: str) -> None:
        if not self.ok:
            raise RemoteHttpError(api_name, self.status_code, self.text)


class JinaClient:
    """Stateless adapter; safe to share between concurrent tool calls."""

    def __init__(
        self,
        reader_url: str = DEFAULT_READER_URL,
        search_url: str = DEFAULT_SEARCH_URL,
        fact_check_url: str = DEFAULT_FACT_CHECK_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.reader_url = reader_url
        self.search_url = search_url
        self.fact_check_url = fact_check_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: JinaMcpSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "JinaClient":
        return cls(
            reader_url=settings.reader_url,
            search_url=settings.search_url,
            fact_check_url=settings.fact_check_url,
            timeout=settings.http_timeout,
            transport=transport,
        )

    async def _request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> RemoteResponse:
        logger.debug("jina_request", method=method, url=url)
        content = to_json(body) if body is not None else None
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            resp = await client.request(method, url, headers=headers, content=content)
            text = resp.text
        logger.debug("jina_response", url=url, status_code=resp.status_code)
        return RemoteResponse(status_code=resp.status_code, text=text)

    async def fetch_raw(self, url: str) -> str:
        """Plain unauthenticated GET, body returned verbatim."""
        resp = await self._request("GET", url)
        resp.raise_for_status("GitHub raw")
        return resp.text

    async def read(
        self,
        url: str,
        mode: ExtractionMode = "standard",
        output_format: OutputFormat = "markdown",
        custom_timeout: int | None = None,
    ) -> str:
        """
        Read a web page and return its extracted content.

        GitHub blob URLs bypass the reader entirely; mode, format and timeout
        do not apply to them.
        """
        github = classify_url(url)
        if github.is_special_case:
            logger.info("github_raw_bypass", url=url, raw_url=github.rewritten_url)
            return await self.fetch_raw(github.rewritten_url)

        headers = build_reader_headers(mode, output_format, custom_timeout)
        resp = await self._request("POST", self.reader_url, headers=headers, body={"url": url})
        resp.raise_for_status("Jina Reader")

        raw = from_json(resp.text)
        payload = ReaderPayload.model_validate(raw) if isinstance(raw, dict) else ReaderPayload()
        content = payload.extracted_content()
        if content is not None:
            return content
        if raw:
            return to_json(raw, indent=True)
        return f"No content extracted from {url}"

    async def search(self, query: str, site_filter: str | None = None) -> str:
        """Run a web search and return the raw response body."""
        url = f"{self.search_url}?q={quote(query, safe='')}"
        resp = await self._request("GET", url, headers=build_search_headers(site_filter))
        resp.raise_for_status("Jina Search")
        return resp.text

    async def search_results(self, query: str) -> SearchPayload:
        """Run a web search and parse the result list."""
        text = await self.search(query)
        return SearchPayload.model_validate(from_json(text))

    async def fact_check(self, statement: str, deepdive: bool = False) -> Any:
        """Submit a statement for grounding; returns the decoded JSON payload."""
        resp = await self._request(
            "POST",
            self.fact_check_url,
            headers=build_fact_check_headers(),
            body={"statement": statement, "deepdive": deepdive},
        )
        resp.raise_for_status("Jina Fact-Check")
        return from_json(resp.text)


__all__ = ["JinaClient", "RemoteResponse"]
