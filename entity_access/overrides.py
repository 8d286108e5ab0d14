"""Override resolver: per-operation escape hatch from the generic pipeline."""
from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Optional

from entity_access.config.constants import STANDARD_OPERATIONS
from entity_access.entity_config import EntityConfig

logger = logging.getLogger(__name__)


def resolve_override(config: EntityConfig, operation: str) -> Optional[Callable[..., Any]]:
    """Returns the caller-supplied replacement for ``operation``, if any."""
    override = config.custom_methods.get(operation)
    if override is None and operation in STANDARD_OPERATIONS:
        override = getattr(config, operation)
    return override


async def invoke_override(override: Callable[..., Any], operation: str, *args: Any) -> Any:
    """Calls an override and returns its (awaited) result unmodified."""
    logger.debug("Using override for %s", operation)
    result = override(*args)
    if inspect.isawaitable(result):
        result = await result
    return result
