"""Tests for the jina_search tools (current and legacy)."""

import httpx
import pytest

from jina_mcp_tools.jina.models import SearchHit
from jina_mcp_tools.tool.builtin.jina_search import (
    JinaSearchTool,
    LegacyJinaSearchTool,
    format_results,
)

RAW_BODY = '{"code":200,"data":[{"title":"Qubits","url":"https://q.example"}]}'

SEARCH_BODY = {
    "data": [
        {
            "title": "Quantum 101",
            "url": "https://a.example",
            "description": "Intro",
            "date": "2024-01-02",
            "usage": {"tokens": 10},
        },
        {"url": "https://b.example", "usage": {"tokens": 5}},
        {"title": "Third", "url": "https://c.example", "description": "More"},
    ]
}


class TestJinaSearchTool:
    @pytest.mark.asyncio
    async def test_returns_raw_body_with_site_filter(self, mock_jina):
        client, requests = mock_jina(lambda request: httpx.Response(200, text=RAW_BODY))
        tool = JinaSearchTool(client)

        result = await tool.execute({"query": "quantum computing", "siteFilter": "github.com"})

        assert result.is_success
        assert result.content == RAW_BODY
        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert requests[0].url.params["q"] == "quantum computing"
        assert requests[0].headers["x-site"] == "https://github.com"

    @pytest.mark.asyncio
    async def test_count_is_accepted_but_not_applied(self, mock_jina):
        client, requests = mock_jina(lambda request: httpx.Response(200, text=RAW_BODY))
        tool = JinaSearchTool(client)

        result = await tool.execute({"query": "q", "count": 1})

        assert result.content == RAW_BODY
        assert "count" not in requests[0].url.params

    @pytest.mark.asyncio
    async def test_credential_is_attached(self, mock_jina, monkeypatch):
        monkeypatch.setenv("JINA_API_KEY", "jina_0123456789")
        client, requests = mock_jina(lambda request: httpx.Response(200, text=RAW_BODY))

        await JinaSearchTool(client).execute({"query": "q"})

        assert requests[0].headers["authorization"] == "Bearer jina_0123456789"

    @pytest.mark.asyncio
    async def test_error_status(self, mock_jina):
        client, _ = mock_jina(lambda request: httpx.Response(401, text="invalid key"))

        result = await JinaSearchTool(client).execute({"query": "q"})

        assert not result.is_success
        assert result.content == "Error: Jina Search API error (401): invalid key"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("arguments", [{}, {"query": ""}, {"query": "q", "count": 0}])
    async def test_invalid_parameters(self, mock_jina, arguments):
        client, requests = mock_jina(lambda request: httpx.Response(200, text=RAW_BODY))

        result = await JinaSearchTool(client).execute(arguments)

        assert not result.is_success
        assert requests == []


class TestLegacyJinaSearchTool:
    @pytest.mark.asyncio
    async def test_markdown_is_default_and_count_slices(self, mock_jina):
        client, _ = mock_jina(lambda request: httpx.Response(200, json=SEARCH_BODY))

        result = await LegacyJinaSearchTool(client).execute({"query": "quantum", "count": 2})

        assert result.is_success
        assert result.content == (
            "1. **Quantum 101**\n"
            "   https://a.example\n"
            "   Intro\n"
            "   Date: 2024-01-02\n"
            "\n"
            "2. **Untitled**\n"
            "   https://b.example\n"
            "   \n"
            "   \n"
        )

    @pytest.mark.asyncio
    async def test_usage_is_dropped_from_output(self, mock_jina):
        client, _ = mock_jina(lambda request: httpx.Response(200, json=SEARCH_BODY))

        result = await LegacyJinaSearchTool(client).execute({"query": "quantum"})

        assert len(result.output) == 3
        assert all("usage" not in hit for hit in result.output)
        assert result.output[0]["title"] == "Quantum 101"

    @pytest.mark.asyncio
    async def test_non_positive_count_keeps_everything(self, mock_jina):
        client, _ = mock_jina(lambda request: httpx.Response(200, json=SEARCH_BODY))

        result = await LegacyJinaSearchTool(client).execute(
            {"query": "quantum", "count": 0, "returnFormat": "text"}
        )

        assert result.content.count("\n\n") == 2
        assert result.content.startswith("1. Quantum 101\n")

    @pytest.mark.asyncio
    async def test_missing_data_renders_empty(self, mock_jina):
        client, _ = mock_jina(lambda request: httpx.Response(200, json={"code": 200}))

        result = await LegacyJinaSearchTool(client).execute({"query": "quantum"})

        assert result.is_success
        assert result.content == ""

    @pytest.mark.asyncio
    async def test_non_string_fields_are_rendered(self, mock_jina):
        client, _ = mock_jina(
            lambda request: httpx.Response(200, json={"data": [{"title": "A", "date": 2024}]})
        )

        result = await LegacyJinaSearchTool(client).execute({"query": "quantum"})

        assert result.is_success
        assert "Date: 2024" in result.content
        assert result.output[0]["date"] == "2024"

    @pytest.mark.asyncio
    async def test_malformed_json_is_error(self, mock_jina):
        client, _ = mock_jina(lambda request: httpx.Response(200, text="oops"))

        result = await LegacyJinaSearchTool(client).execute({"query": "quantum"})

        assert not result.is_success


def test_format_results_html():
    hits = [SearchHit(title="T", url="https://t.example", description="D")]

    html = format_results(hits, "html")

    assert html.startswith("<ol><li><strong>T</strong><br>")
    assert '<a href="https://t.example">https://t.example</a><br>' in html
    assert html.endswith("</li></ol>")


def test_format_results_text():
    hits = [
        SearchHit(title="One", url="https://1.example", description="first", date="2020"),
        SearchHit(),
    ]

    assert format_results(hits, "text") == (
        "1. One\n   https://1.example\n   first\n   Date: 2020"
        "\n\n"
        "2. Untitled\n   \n   \n   "
    )
