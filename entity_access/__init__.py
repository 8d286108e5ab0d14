"""Declarative entity-access layer: config-driven async CRUD clients."""

from __future__ import annotations

from .config.settings import EntityAccessSettings, get_settings
from .entity_config import EntityConfig, EntityEndpoints
from .errors import (
    ApiError,
    EntityAccessError,
    NormalizationError,
    OperationCancelledError,
    TransportError,
)
from .hooks import LifecycleHooks
from .schemas import PaginatedResult, PaginationDescriptor
from .service_factory import (
    CrudService,
    ExtendedCrudService,
    create_crud_service,
    create_extended_service,
)
from .session import AnonymousSession, CallableSession, SessionAccessor, StaticSession
from .transport import HttpxTransport, Transport, TransportRequest, TransportResponse

__all__ = [
    "AnonymousSession",
    "ApiError",
    "CallableSession",
    "CrudService",
    "EntityAccessError",
    "EntityAccessSettings",
    "EntityConfig",
    "EntityEndpoints",
    "ExtendedCrudService",
    "HttpxTransport",
    "LifecycleHooks",
    "NormalizationError",
    "OperationCancelledError",
    "PaginatedResult",
    "PaginationDescriptor",
    "SessionAccessor",
    "StaticSession",
    "Transport",
    "TransportError",
    "TransportRequest",
    "TransportResponse",
    "create_crud_service",
    "create_extended_service",
    "get_settings",
]
