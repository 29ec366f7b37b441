import httpx
import pytest

from jina_mcp_tools.jina.client import JinaClient


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Tests start unauthenticated unless they set JINA_API_KEY themselves."""
    monkeypatch.delenv("JINA_API_KEY", raising=False)


@pytest.fixture
def mock_jina():
    """
    Build a JinaClient whose requests are answered by `handler`.

    Returns (client, requests) where `requests` collects every httpx.Request
    the client sent, in order.
    """

    def _factory(handler):
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = JinaClient(transport=httpx.MockTransport(_record))
        return client, requests

    return _factory
