"""Exports for the shared entity-access schema models."""

from __future__ import annotations

from .common import ErrorBody
from .common import NormalizedEnvelope
from .common import PaginatedResult
from .common import PaginationDescriptor

__all__ = [
  "ErrorBody",
  "NormalizedEnvelope",
  "PaginatedResult",
  "PaginationDescriptor",
]
