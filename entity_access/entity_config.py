"""Declarative description of one remote resource collection."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Literal, Mapping, Optional

from entity_access.hooks import LifecycleHooks
from entity_access.mapping import RequestMapper, ResponseMapper

ID_PLACEHOLDER = "{id}"


@dataclass(frozen=True)
class EntityEndpoints:
    """Optional per-operation path templates overriding ``base_path``.

    ``get``, ``update`` and ``delete`` templates carry an ``{id}``
    placeholder, e.g. ``/api/items/detail/{id}``.
    """

    list: Optional[str] = None
    get: Optional[str] = None
    create: Optional[str] = None
    update: Optional[str] = None
    delete: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("get", "update", "delete"):
            template = getattr(self, name)
            if template is not None and ID_PLACEHOLDER not in template:
                raise ValueError(f"Endpoint template {name!r} must contain {ID_PLACEHOLDER}: {template!r}")


@dataclass(frozen=True)
class EntityConfig:
    """Immutable configuration handed once to the service builder.

    ``custom_methods`` may replace any standard operation by name and may
    add new ones. The direct ``get_list``/``get_one``/``create``/``update``/
    ``delete`` slots are an alternative spelling for replacing a standard
    operation; ``custom_methods`` wins when both are set.
    """

    base_path: str
    endpoints: EntityEndpoints = field(default_factory=EntityEndpoints)
    map_request: Optional[RequestMapper] = None
    map_response: Optional[ResponseMapper] = None
    hooks: LifecycleHooks = field(default_factory=LifecycleHooks)
    custom_methods: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
    get_list: Optional[Callable[..., Any]] = None
    get_one: Optional[Callable[..., Any]] = None
    create: Optional[Callable[..., Any]] = None
    update: Optional[Callable[..., Any]] = None
    delete: Optional[Callable[..., Any]] = None
    update_method: Optional[Literal["PUT", "PATCH"]] = None

    def __post_init__(self) -> None:
        base_path = self.base_path.rstrip("/")
        if not base_path:
            raise ValueError("EntityConfig.base_path must not be empty")
        if self.update_method not in (None, "PUT", "PATCH"):
            raise ValueError(f"Unsupported update method {self.update_method!r}")
        # frozen: bypass __setattr__ to store the normalized values
        object.__setattr__(self, "base_path", base_path)
        object.__setattr__(self, "custom_methods", MappingProxyType(dict(self.custom_methods)))

    def list_path(self) -> str:
        return self.endpoints.list or self.base_path

    def create_path(self) -> str:
        return self.endpoints.create or self.base_path

    def item_path(self, operation: str, quoted_id: str) -> str:
        template = getattr(self.endpoints, operation)
        if template is None:
            return f"{self.base_path}/{quoted_id}"
        return template.replace(ID_PLACEHOLDER, quoted_id)
