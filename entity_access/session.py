"""Session accessors: pluggable sources of the current bearer token."""
from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional, Union

from entity_access.config.settings import EntityAccessSettings, get_settings

TokenFactory = Callable[[], Union[Optional[str], Awaitable[Optional[str]]]]


class SessionAccessor(ABC):
    @abstractmethod
    async def get_token(self) -> Optional[str]: ...


class AnonymousSession(SessionAccessor):
    """No session; requests go out without an Authorization header."""
    async def get_token(self) -> Optional[str]:
        return None


class StaticSession(SessionAccessor):
    """A fixed bearer token, e.g. a service account key."""
    def __init__(self, token: str):
        self._token = token

    async def get_token(self) -> Optional[str]:
        return self._token or None


class CallableSession(SessionAccessor):
    """Delegates to a sync or async callable on every call.

    The token is never cached here, so a refreshed session is picked up by
    the next request.
    """
    def __init__(self, factory: TokenFactory):
        self._factory = factory

    async def get_token(self) -> Optional[str]:
        token = self._factory()
        if inspect.isawaitable(token):
            token = await token
        return token or None


def session_from_settings(settings: EntityAccessSettings | None = None) -> SessionAccessor:
    settings = settings or get_settings()
    if settings.api_token:
        return StaticSession(settings.api_token)
    return AnonymousSession()
