"""Lifecycle hooks run around the mutating CRUD operations.

Hooks may be plain functions or coroutines. They always run one at a time,
in pipeline order, and their exceptions propagate unchanged. An ``after_*``
hook that raises fails the whole call even though the remote mutation has
already been applied; callers must treat such a failure as "mutation state
unknown" rather than "nothing happened".
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from entity_access.errors import OperationCancelledError

logger = logging.getLogger(__name__)

Hook = Callable[..., Any]


@dataclass(frozen=True)
class LifecycleHooks:
    before_create: Optional[Hook] = None
    after_create: Optional[Hook] = None
    before_update: Optional[Hook] = None
    after_update: Optional[Hook] = None
    before_delete: Optional[Hook] = None
    after_delete: Optional[Hook] = None


async def _call(hook: Hook, *args: Any) -> Any:
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def _call_after(name: str, hook: Hook, *args: Any) -> None:
    try:
        await _call(hook, *args)
    except Exception:
        logger.warning("%s hook failed after the remote mutation succeeded", name)
        raise


class HookExecutor:
    """Runs the hooks of one ``LifecycleHooks`` set."""

    def __init__(self, hooks: Optional[LifecycleHooks] = None):
        self._hooks = hooks or LifecycleHooks()

    async def before_create(self, payload: Any) -> Any:
        if self._hooks.before_create is None:
            return payload
        result = await _call(self._hooks.before_create, payload)
        return payload if result is None else result

    async def after_create(self, entity: Any) -> None:
        if self._hooks.after_create is not None:
            await _call_after("after_create", self._hooks.after_create, entity)

    async def before_update(self, entity_id: str, payload: Any) -> Any:
        if self._hooks.before_update is None:
            return payload
        result = await _call(self._hooks.before_update, entity_id, payload)
        return payload if result is None else result

    async def after_update(self, entity: Any) -> None:
        if self._hooks.after_update is not None:
            await _call_after("after_update", self._hooks.after_update, entity)

    async def before_delete(self, entity_id: str) -> None:
        """Raises ``OperationCancelledError`` when the hook answers False."""
        if self._hooks.before_delete is None:
            return
        proceed = await _call(self._hooks.before_delete, entity_id)
        if proceed is False:
            logger.info("Delete of %s cancelled by before_delete hook", entity_id)
            raise OperationCancelledError("delete", entity_id)

    async def after_delete(self, entity_id: str) -> None:
        if self._hooks.after_delete is not None:
            await _call_after("after_delete", self._hooks.after_delete, entity_id)
