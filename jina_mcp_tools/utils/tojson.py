from typing import Any

import orjson


def to_json(obj: Any, indent: bool = False) -> str:
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(obj, option=option).decode("utf-8")


def from_json(text: str | bytes) -> Any:
    """Parse JSON text. Raises orjson.JSONDecodeError (a ValueError) on bad input."""
    return orjson.loads(text)
