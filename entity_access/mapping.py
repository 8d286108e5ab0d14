"""Entity mapper: applies the configured inbound and outbound transforms."""
from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")

ResponseMapper = Callable[[Any], Any]
RequestMapper = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


class EntityMapper(Generic[T]):
    """Pure, synchronous record transforms. Unset mappers are identity."""

    def __init__(
        self,
        map_response: Optional[ResponseMapper] = None,
        map_request: Optional[RequestMapper] = None,
    ):
        self._map_response = map_response or _identity
        self._map_request = map_request or _identity

    def map_one(self, raw: Any) -> T:
        return self._map_response(raw)

    def map_many(self, records: Iterable[Any]) -> list[T]:
        return [self._map_response(raw) for raw in records]

    def map_outbound(self, payload: Any) -> Any:
        return self._map_request(payload)
