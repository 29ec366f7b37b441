"""
Response shapes returned by the Jina endpoints.

Every field is optional; the remote API omits fields freely and callers
fall back to documented defaults instead of indexing raw dicts.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from jina_mcp_tools.utils.tojson import to_json


class ReaderData(BaseModel):
    model_config = ConfigDict(extra="allow")

    content: str | None = None
    title: str | None = None
    url: str | None = None


class ReaderPayload(BaseModel):
    """Body of a reader response: `{"data": {"content": ...}, ...}`."""

    model_config = ConfigDict(extra="allow")

    data: ReaderData | None = None
    content: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _ignore_non_object_data(cls, value: Any) -> Any:
        # `data` only carries content when it is an object
        if isinstance(value, dict) and not isinstance(value.get("data"), (dict, type(None))):
            return {k: v for k, v in value.items() if k != "data"}
        return value

    def extracted_content(self) -> str | None:
        """Nested `data.content`, else top-level `content`, else None."""
        source = self.data if self.data is not None else self
        return source.content or None


class SearchHit(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str | None = None
    url: str | None = None
    description: str | None = None
    date: str | None = None
    usage: Any = None

    @field_validator("title", "url", "description", "date", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return to_json(value)


class SearchPayload(BaseModel):
    """Body of a search response: `{"data": [hit, ...], ...}`."""

    model_config = ConfigDict(extra="allow")

    data: list[SearchHit] | None = None

    @property
    def hits(self) -> list[SearchHit]:
        return list(self.data or [])


__all__ = ["ReaderData", "ReaderPayload", "SearchHit", "SearchPayload"]
