"""Error taxonomy for the entity-access layer.

Every failure surfaces to the caller as one of these exceptions; none are
converted into default values.
"""
from __future__ import annotations

from typing import Any, Optional


class EntityAccessError(Exception):
    """Base class for all entity-access failures."""

    kind = "error"


class TransportError(EntityAccessError):
    """The remote host could not be reached. Not retried by this layer."""

    kind = "transport"

    def __init__(self, message: str, *, method: str = "", url: str = ""):
        super().__init__(message)
        self.method = method
        self.url = url


class ApiError(EntityAccessError):
    """The remote API answered with a non-2xx status."""

    kind = "api"

    def __init__(self, status_code: int, message: str, body: Any = None):
        super().__init__(f"API error: {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body


class NormalizationError(EntityAccessError):
    """A response body did not match any recognized envelope shape."""

    kind = "normalization"

    def __init__(self, message: str, body: Any = None):
        super().__init__(message)
        self.body = body


class OperationCancelledError(EntityAccessError):
    """A ``before_delete`` hook vetoed the operation locally."""

    kind = "cancelled"

    def __init__(self, operation: str, entity_id: Optional[str] = None):
        detail = f" for id {entity_id!r}" if entity_id is not None else ""
        super().__init__(f"{operation.capitalize()} operation cancelled{detail}")
        self.operation = operation
        self.entity_id = entity_id
