"""
Jina API exceptions.
"""


class JinaError(Exception):
    """Base exception for all Jina API errors."""

    pass


class RemoteHttpError(JinaError):
    """Raised when a remote endpoint answers with a non-2xx status."""

    def __init__(self, api_name: str, status_code: int, body: str) -> None:
        self.api_name = api_name
        self.status_code = status_code
        self.body = body
        super().__init__(f"{api_name} API error ({status_code}): {body}")
