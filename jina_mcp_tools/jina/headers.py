"""
Request header construction for the Jina reader and search endpoints.

Extraction modes pick the rendering engine and content selection strategy,
output formats pick the textual shape of the result. The two are applied
independently: format headers are layered over mode headers and only ever
add keys with compatible values.
"""

from typing import Literal

from jina_mcp_tools.jina.credentials import create_headers

ExtractionMode = Literal["standard", "comprehensive", "clean_content"]
OutputFormat = Literal["default", "markdown", "text", "structured"]

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

MODE_HEADERS: dict[str, dict[str, str]] = {
    "standard": {
        "X-Engine": "direct",
        "X-With-Links-Summary": "true",
        "X-Timeout": "10",
    },
    "comprehensive": {
        "X-Engine": "browser",
        "X-With-Links-Summary": "true",
        "X-With-Images-Summary": "true",
        "X-Timeout": "15",
    },
    "clean_content": {
        "X-Engine": "browser",
        "X-Target-Selector": "main,article,.content",
        "X-Remove-Selector": "nav,header,footer,.sidebar,.ads",
        "X-Timeout": "15",
    },
}

FORMAT_HEADERS: dict[str, dict[str, str]] = {
    "default": {},
    "markdown": {"X-Return-Format": "markdown"},
    "text": {"X-Return-Format": "text"},
    "structured": {
        "X-Return-Format": "markdown",
        "X-With-Links-Summary": "true",
        "X-With-Images-Summary": "true",
    },
}


def build_reader_headers(
    mode: ExtractionMode,
    output_format: OutputFormat,
    custom_timeout: int | None = None,
) -> dict[str, str]:
    """Build the header set for one reader request."""
    headers = dict(JSON_HEADERS)
    headers.update(MODE_HEADERS[mode])
    headers.update(FORMAT_HEADERS[output_format])
    if custom_timeout is not None:
        headers["X-Timeout"] = str(custom_timeout)
    return create_headers(headers)


def build_search_headers(site_filter: str | None = None) -> dict[str, str]:
    """Build the header set for one search request."""
    headers = {
        "Accept": "application/json",
        "X-Respond-With": "no-content",
    }
    if site_filter:
        headers["X-Site"] = f"https://{site_filter}"
    return create_headers(headers)


def build_fact_check_headers() -> dict[str, str]:
    return create_headers(JSON_HEADERS)


__all__ = [
    "ExtractionMode",
    "OutputFormat",
    "MODE_HEADERS",
    "FORMAT_HEADERS",
    "build_reader_headers",
    "build_search_headers",
    "build_fact_check_headers",
]
