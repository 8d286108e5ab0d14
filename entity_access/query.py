"""Query string construction for list filters."""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional

import httpx


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def build_query_string(filters: Optional[Mapping[str, Any]]) -> str:
    """Encodes every present filter as one ``key=value`` component.

    ``None`` values are omitted entirely. Insertion order is preserved.
    """
    if not filters:
        return ""
    params = [(key, _encode_value(value)) for key, value in filters.items() if value is not None]
    return str(httpx.QueryParams(params))


def with_query(path: str, filters: Optional[Mapping[str, Any]]) -> str:
    query = build_query_string(filters)
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"
