import json

import httpx
import pytest

from jina_mcp_tools.config.settings import JinaMcpSettings
from jina_mcp_tools.jina.client import JinaClient
from jina_mcp_tools.jina.errors import RemoteHttpError


@pytest.mark.asyncio
async def test_read_posts_url_and_returns_nested_content(mock_jina):
    client, requests = mock_jina(
        lambda request: httpx.Response(200, json={"data": {"content": "# Hello"}})
    )

    content = await client.read("https://example.com/post", mode="comprehensive", output_format="text")

    assert content == "# Hello"
    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://r.jina.ai/"
    assert json.loads(request.content) == {"url": "https://example.com/post"}
    assert request.headers["x-engine"] == "browser"
    assert request.headers["x-return-format"] == "text"


@pytest.mark.asyncio
async def test_read_falls_back_to_top_level_content(mock_jina):
    client, _ = mock_jina(lambda request: httpx.Response(200, json={"content": "flat"}))

    assert await client.read("https://example.com") == "flat"


@pytest.mark.asyncio
async def test_read_without_content_returns_whole_payload(mock_jina):
    body = {"code": 200, "data": {"title": "t", "links": {"a": "b"}}}
    client, _ = mock_jina(lambda request: httpx.Response(200, json=body))

    out = await client.read("https://example.com")

    assert '"title"' in out
    assert json.loads(out) == body


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, None])
async def test_read_empty_body_returns_placeholder(mock_jina, body):
    client, _ = mock_jina(lambda request: httpx.Response(200, json=body))

    assert await client.read("https://example.com") == "No content extracted from https://example.com"


@pytest.mark.asyncio
async def test_read_non_object_data_falls_back_to_top_level_content(mock_jina):
    client, _ = mock_jina(
        lambda request: httpx.Response(200, json={"data": "oops", "content": "hello"})
    )

    assert await client.read("https://example.com") == "hello"


@pytest.mark.asyncio
async def test_read_error_status_raises_with_body(mock_jina):
    client, _ = mock_jina(lambda request: httpx.Response(422, text="bad url"))

    with pytest.raises(RemoteHttpError) as exc_info:
        await client.read("https://example.com")

    assert exc_info.value.status_code == 422
    assert str(exc_info.value) == "Jina Reader API error (422): bad url"


@pytest.mark.asyncio
async def test_read_malformed_json_raises_value_error(mock_jina):
    client, _ = mock_jina(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(ValueError):
        await client.read("https://example.com")


@pytest.mark.asyncio
async def test_github_blob_is_fetched_raw_without_reader_headers(mock_jina, monkeypatch):
    monkeypatch.setenv("JINA_API_KEY", "should-not-be-sent")
    client, requests = mock_jina(lambda request: httpx.Response(200, text="# README\nraw body"))

    content = await client.read(
        "https://github.com/acme/repo/blob/main/README.md",
        mode="clean_content",
        output_format="structured",
        custom_timeout=30,
    )

    assert content == "# README\nraw body"
    assert len(requests) == 1
    request = requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://raw.githubusercontent.com/acme/repo/refs/heads/main/README.md"
    for header in ("authorization", "x-engine", "x-return-format", "x-timeout", "x-target-selector"):
        assert header not in request.headers


@pytest.mark.asyncio
async def test_github_raw_error_status_raises(mock_jina):
    client, _ = mock_jina(lambda request: httpx.Response(404, text="404: Not Found"))

    with pytest.raises(RemoteHttpError) as exc_info:
        await client.read("https://github.com/acme/repo/blob/main/missing.md")

    assert exc_info.value.status_code == 404
    assert "GitHub raw API error (404)" in str(exc_info.value)


@pytest.mark.asyncio
async def test_search_encodes_query_and_sets_site(mock_jina):
    client, requests = mock_jina(lambda request: httpx.Response(200, text='{"data": []}'))

    text = await client.search("quantum computing", site_filter="github.com")

    assert text == '{"data": []}'
    request = requests[0]
    assert request.method == "GET"
    assert request.url.host == "s.jina.ai"
    assert request.url.params["q"] == "quantum computing"
    assert b"quantum%20computing" in request.url.raw_path
    assert request.headers["x-site"] == "https://github.com"
    assert request.headers["x-respond-with"] == "no-content"


@pytest.mark.asyncio
async def test_search_results_parses_hits(mock_jina):
    body = {"data": [{"title": "A", "url": "https://a.example"}, {"title": "B"}]}
    client, _ = mock_jina(lambda request: httpx.Response(200, json=body))

    payload = await client.search_results("anything")

    assert [hit.title for hit in payload.hits] == ["A", "B"]


@pytest.mark.asyncio
async def test_search_results_null_data_is_empty(mock_jina):
    client, _ = mock_jina(lambda request: httpx.Response(200, json={"data": None}))

    payload = await client.search_results("anything")

    assert payload.hits == []


@pytest.mark.asyncio
async def test_fact_check_posts_statement(mock_jina, monkeypatch):
    monkeypatch.setenv("JINA_API_KEY", "jina_abcdefghij")
    client, requests = mock_jina(
        lambda request: httpx.Response(200, json={"data": {"factuality": 0.9}})
    )

    payload = await client.fact_check("The sky is blue", deepdive=True)

    assert payload == {"data": {"factuality": 0.9}}
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://g.jina.ai/"
    assert json.loads(request.content) == {"statement": "The sky is blue", "deepdive": True}
    assert request.headers["authorization"] == "Bearer jina_abcdefghij"


@pytest.mark.asyncio
async def test_fact_check_error_status(mock_jina):
    client, _ = mock_jina(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(RemoteHttpError, match=r"Jina Fact-Check API error \(500\): boom"):
        await client.fact_check("x")


@pytest.mark.asyncio
async def test_network_failure_surfaces_as_httpx_error(mock_jina):
    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = mock_jina(_refuse)

    with pytest.raises(httpx.HTTPError):
        await client.search("anything")


def test_from_settings_uses_configured_endpoints():
    settings = JinaMcpSettings(
        reader_url="http://reader.local/",
        search_url="http://search.local/",
        fact_check_url="http://grounding.local/",
        http_timeout=12.5,
    )

    client = JinaClient.from_settings(settings)

    assert client.reader_url == "http://reader.local/"
    assert client.search_url == "http://search.local/"
    assert client.fact_check_url == "http://grounding.local/"
    assert client.timeout == 12.5
