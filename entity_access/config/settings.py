"""Settings model for the entity-access transport and session defaults."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

_VALID_UPDATE_METHODS = frozenset({"PUT", "PATCH"})


class EntityAccessSettings(BaseSettings):
  """Runtime settings loaded from environment variables."""

  api_base_url: str = "http://localhost:8080"
  request_timeout_seconds: float = 15.0
  api_token: str = ""
  default_update_method: Literal["PUT", "PATCH"] = "PUT"

  model_config = SettingsConfigDict(
    env_prefix="ENTITY_ACCESS_",
    env_file=".env",
    extra="ignore",
  )

  @field_validator("default_update_method", mode="before")
  @classmethod
  def _validate_update_method(cls, method: str) -> str:
    normalized_method = method.upper()
    if normalized_method not in _VALID_UPDATE_METHODS:
      raise ValueError(
        f"Invalid update method {method!r}. Expected one of"
        f" {sorted(_VALID_UPDATE_METHODS)}."
      )
    return normalized_method

  @field_validator("api_base_url")
  @classmethod
  def _strip_trailing_slash(cls, url: str) -> str:
    return url.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> EntityAccessSettings:
  """Returns a cached settings object shared by transports and sessions."""

  return EntityAccessSettings()
