"""Shared constants for the entity-access layer and its mock server."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

STANDARD_OPERATIONS: tuple[str, ...] = (
  "get_list",
  "get_one",
  "create",
  "update",
  "delete",
)

NO_CONTENT_STATUS_CODES: frozenset[int] = frozenset((204, 205))

JSON_CONTENT_TYPE: str = "application/json"

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
  {
    "Accept": JSON_CONTENT_TYPE,
    "Content-Type": JSON_CONTENT_TYPE,
  }
)

# Keys probed, in order, for a human readable message in an error body.
ERROR_MESSAGE_KEYS: tuple[str, ...] = ("error", "message", "detail")
