"""CRUD service builder.

Turns an ``EntityConfig`` into a service exposing ``get_list``, ``get_one``,
``create``, ``update`` and ``delete``. Each call runs independently:

    override check -> session token -> outbound mapping -> transport
    -> response parsing -> envelope normalization -> inbound mapping -> hooks

The service holds no state between calls beyond its config, session accessor
and transport, so one instance may serve any number of concurrent tasks.
Concurrent mutations of the same entity race at the remote API.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar
from urllib.parse import quote

import httpx
from pydantic_core import to_json

from entity_access.config.constants import (
    DEFAULT_HEADERS,
    ERROR_MESSAGE_KEYS,
    JSON_CONTENT_TYPE,
    NO_CONTENT_STATUS_CODES,
    STANDARD_OPERATIONS,
)
from entity_access.config.settings import get_settings
from entity_access.entity_config import EntityConfig
from entity_access.envelope import normalize_list, normalize_record
from entity_access.errors import ApiError, NormalizationError
from entity_access.hooks import HookExecutor
from entity_access.mapping import EntityMapper
from entity_access.overrides import invoke_override, resolve_override
from entity_access.query import with_query
from entity_access.schemas import PaginatedResult
from entity_access.session import SessionAccessor, session_from_settings
from entity_access.transport import HttpxTransport, Transport, TransportRequest, TransportResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Marks a response that carried nothing to decode (204, empty, non-JSON).
NO_BODY: Any = object()


def _is_json_content_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_CONTENT_TYPE or media_type.endswith("+json")


def decode_body(response: TransportResponse) -> Any:
    """Decodes a JSON body, or returns ``NO_BODY`` when there is none.

    A literal JSON ``null`` decodes to ``None``. Reads reject it like a
    missing body; mutations treat it as one.
    """
    if response.status_code in NO_CONTENT_STATUS_CODES:
        return NO_BODY
    if not response.content or response.header("content-length") == "0":
        return NO_BODY
    if not _is_json_content_type(response.header("content-type")):
        return NO_BODY
    try:
        return json.loads(response.content)
    except ValueError as exc:
        raise NormalizationError(
            f"Response declared JSON but could not be decoded: {exc}",
            body=response.text,
        ) from exc


def api_error_from_response(response: TransportResponse) -> ApiError:
    """Builds an ``ApiError`` with a best-effort message from the body."""
    text = response.text
    body: Any = None
    if text:
        try:
            body = json.loads(text)
        except ValueError:
            body = None

    message = ""
    if isinstance(body, dict):
        for key in ERROR_MESSAGE_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value:
                message = value
                break
            if value:
                message = json.dumps(value, sort_keys=True)
                break
    if not message:
        message = text.strip() or httpx.codes.get_reason_phrase(response.status_code) or "Unknown error"

    logger.error("API error: %d %s", response.status_code, text)
    return ApiError(response.status_code, message, body=body if body is not None else text)


class CrudService(Generic[T]):
    """Standard CRUD operations for one resource, driven by its config."""

    def __init__(
        self,
        config: EntityConfig,
        *,
        session: SessionAccessor,
        transport: Transport,
        update_method: Optional[str] = None,
    ):
        self._config = config
        self._session = session
        self._transport = transport
        self._update_method = update_method or config.update_method or "PUT"
        self._mapper: EntityMapper[T] = EntityMapper(config.map_response, config.map_request)
        self._hooks = HookExecutor(config.hooks)

    @property
    def config(self) -> EntityConfig:
        return self._config

    # --- Standard operations ---

    async def get_list(self, filters: Optional[Mapping[str, Any]] = None) -> PaginatedResult[T]:
        override = resolve_override(self._config, "get_list")
        if override is not None:
            return await invoke_override(override, "get_list", filters)

        body = await self._send("GET", with_query(self._config.list_path(), filters))
        envelope = normalize_list(None if body is NO_BODY else body)
        return PaginatedResult(
            data=self._mapper.map_many(envelope.records),
            pagination=envelope.pagination,
        )

    async def get_one(self, entity_id: Any) -> T:
        override = resolve_override(self._config, "get_one")
        if override is not None:
            return await invoke_override(override, "get_one", entity_id)

        body = await self._send("GET", self._item_path("get", entity_id))
        return self._mapper.map_one(normalize_record(None if body is NO_BODY else body))

    async def create(self, payload: Any) -> Optional[T]:
        override = resolve_override(self._config, "create")
        if override is not None:
            return await invoke_override(override, "create", payload)

        prepared = await self._hooks.before_create(payload)
        body = await self._send(
            "POST", self._config.create_path(), self._mapper.map_outbound(prepared)
        )
        entity = self._map_mutation_result(body)
        await self._hooks.after_create(entity)
        return entity

    async def update(self, entity_id: Any, payload: Any) -> Optional[T]:
        override = resolve_override(self._config, "update")
        if override is not None:
            return await invoke_override(override, "update", entity_id, payload)

        prepared = await self._hooks.before_update(entity_id, payload)
        body = await self._send(
            self._update_method,
            self._item_path("update", entity_id),
            self._mapper.map_outbound(prepared),
        )
        entity = self._map_mutation_result(body)
        await self._hooks.after_update(entity)
        return entity

    async def delete(self, entity_id: Any) -> None:
        override = resolve_override(self._config, "delete")
        if override is not None:
            return await invoke_override(override, "delete", entity_id)

        await self._hooks.before_delete(entity_id)
        await self._send("DELETE", self._item_path("delete", entity_id))
        await self._hooks.after_delete(entity_id)
        return None

    # --- Pipeline helpers ---

    def _item_path(self, operation: str, entity_id: Any) -> str:
        return self._config.item_path(operation, quote(str(entity_id), safe=""))

    def _map_mutation_result(self, body: Any) -> Optional[T]:
        if body is NO_BODY or body is None:
            return None
        return self._mapper.map_one(normalize_record(body))

    async def _send(self, method: str, url: str, payload: Any = None) -> Any:
        token = await self._session.get_token()
        headers = dict(DEFAULT_HEADERS)
        if token:
            headers["Authorization"] = f"Bearer {token}"

        content = to_json(payload) if payload is not None else None
        logger.debug("%s %s", method, url)
        response = await self._transport.send(
            TransportRequest(method=method, url=url, headers=headers, content=content)
        )
        if not response.is_success:
            raise api_error_from_response(response)
        return decode_body(response)


class ExtendedCrudService(CrudService[T]):
    """A ``CrudService`` that also exposes non-standard custom methods.

    ``service.archive(...)`` resolves to ``config.custom_methods["archive"]``
    and is called exactly as the config defines it.
    """

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        method = self._config.custom_methods.get(name)
        if method is None:
            raise AttributeError(f"{type(self).__name__!r} has no method {name!r}")
        return method

    def custom_method_names(self) -> list[str]:
        return [name for name in self._config.custom_methods if name not in STANDARD_OPERATIONS]


def _defaults(
    session: Optional[SessionAccessor], transport: Optional[Transport]
) -> tuple[SessionAccessor, Transport]:
    return (
        session if session is not None else session_from_settings(),
        transport if transport is not None else HttpxTransport.from_settings(),
    )


def create_crud_service(
    config: EntityConfig,
    *,
    session: Optional[SessionAccessor] = None,
    transport: Optional[Transport] = None,
) -> CrudService[Any]:
    """Builds the five standard operations for ``config``.

    Without an explicit session or transport, both are built from
    ``EntityAccessSettings``.
    """
    session, transport = _defaults(session, transport)
    return CrudService(
        config,
        session=session,
        transport=transport,
        update_method=config.update_method or get_settings().default_update_method,
    )


def create_extended_service(
    config: EntityConfig,
    *,
    session: Optional[SessionAccessor] = None,
    transport: Optional[Transport] = None,
) -> ExtendedCrudService[Any]:
    """Like ``create_crud_service`` plus the config's extra custom methods."""
    session, transport = _defaults(session, transport)
    service: ExtendedCrudService[Any] = ExtendedCrudService(
        config,
        session=session,
        transport=transport,
        update_method=config.update_method or get_settings().default_update_method,
    )
    extra = service.custom_method_names()
    if extra:
        logger.debug("Service for %s exposes custom methods %s", config.base_path, extra)
    return service
