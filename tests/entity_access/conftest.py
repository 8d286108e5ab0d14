"""Shared fakes for entity-access tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from entity_access.session import StaticSession
from entity_access.transport import Transport, TransportRequest, TransportResponse


class FakeTransport(Transport):
    """Records every request and replays queued responses in order."""

    def __init__(self) -> None:
        self.requests: list[TransportRequest] = []
        self._responses: list[TransportResponse | Exception] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> TransportRequest:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def queue(self, response: TransportResponse | Exception) -> FakeTransport:
        self._responses.append(response)
        return self

    def queue_json(
        self,
        data: Any,
        status_code: int = 200,
        content_type: str = "application/json",
    ) -> FakeTransport:
        content = json.dumps(data).encode("utf-8")
        return self.queue(
            TransportResponse(
                status_code=status_code,
                headers={"content-type": content_type, "content-length": str(len(content))},
                content=content,
            )
        )

    def queue_empty(self, status_code: int = 204) -> FakeTransport:
        return self.queue(
            TransportResponse(status_code=status_code, headers={"content-length": "0"})
        )

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected transport call: {request.method} {request.url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def session() -> StaticSession:
    return StaticSession("mock-entity-token-test")
