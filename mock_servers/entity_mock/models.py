"""Request models for the entity API mock server."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

# How a resource wraps its responses on the wire.
EnvelopeShape = Literal["bare", "wrapped", "double"]


class RecordWrite(BaseModel):
    """Create/update body. Resources are schemaless; unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
