"""
Bearer credential lookup.

The key is read from the environment on every call, so requests issued
without one simply run on the unauthenticated (rate-limited) tier.
"""

import os

JINA_API_KEY_ENV = "JINA_API_KEY"


def resolve_credential() -> str | None:
    """Return the Jina API key, or None when unset or empty."""
    return os.environ.get(JINA_API_KEY_ENV) or None


def create_headers(base_headers: dict[str, str] | None = None) -> dict[str, str]:
    """Copy `base_headers` and attach the Authorization header when a key is set."""
    headers = dict(base_headers or {})
    api_key = resolve_credential()
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers
