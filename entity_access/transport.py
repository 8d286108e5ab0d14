"""Transport invoker: issues a single HTTP request for the service layer."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx

from entity_access.config.settings import EntityAccessSettings, get_settings
from entity_access.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportRequest:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> str:
        """Case-insensitive header lookup; missing headers read as ''."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return ""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport(ABC):
    @abstractmethod
    async def send(self, request: TransportRequest) -> TransportResponse: ...


class HttpxTransport(Transport):
    """Sends requests through ``httpx.AsyncClient``.

    Relative URLs are resolved against ``base_url``. An injected client is
    used as-is and left open; otherwise a short-lived client is opened per
    request.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        timeout: float = 15.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._shared_client = client

    @classmethod
    def from_settings(cls, settings: EntityAccessSettings | None = None) -> HttpxTransport:
        settings = settings or get_settings()
        return cls(settings.api_base_url, timeout=settings.request_timeout_seconds)

    def _url(self, url: str) -> str:
        if "://" in url or not self._base_url:
            return url
        return f"{self._base_url}{url}"

    async def send(self, request: TransportRequest) -> TransportResponse:
        url = self._url(request.url)
        try:
            if self._shared_client is not None:
                response = await self._issue(self._shared_client, request, url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await self._issue(client, request, url)
        except httpx.RequestError as exc:
            logger.warning("Transport failure. method=%s url=%s error=%r", request.method, url, exc)
            raise TransportError(
                f"{request.method} {url} failed: {exc}", method=request.method, url=url,
            ) from exc

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
        )

    @staticmethod
    async def _issue(client: httpx.AsyncClient, request: TransportRequest, url: str) -> httpx.Response:
        return await client.request(
            request.method,
            url,
            headers=dict(request.headers),
            content=request.content,
        )
