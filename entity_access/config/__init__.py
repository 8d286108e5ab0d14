"""Shared entity-access configuration exports."""

from __future__ import annotations

from .constants import DEFAULT_HEADERS
from .constants import ERROR_MESSAGE_KEYS
from .constants import JSON_CONTENT_TYPE
from .constants import NO_CONTENT_STATUS_CODES
from .constants import STANDARD_OPERATIONS
from .settings import EntityAccessSettings
from .settings import get_settings

__all__ = [
  "DEFAULT_HEADERS",
  "ERROR_MESSAGE_KEYS",
  "JSON_CONTENT_TYPE",
  "NO_CONTENT_STATUS_CODES",
  "STANDARD_OPERATIONS",
  "EntityAccessSettings",
  "get_settings",
]
