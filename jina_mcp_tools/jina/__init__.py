from jina_mcp_tools.jina.client import JinaClient, RemoteResponse
from jina_mcp_tools.jina.credentials import create_headers, resolve_credential
from jina_mcp_tools.jina.errors import JinaError, RemoteHttpError
from jina_mcp_tools.jina.github import GithubUrl, classify_url

__all__ = [
    "JinaClient",
    "RemoteResponse",
    "JinaError",
    "RemoteHttpError",
    "GithubUrl",
    "classify_url",
    "create_headers",
    "resolve_credential",
]
