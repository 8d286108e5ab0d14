"""Common envelope, pagination and error models used across the layer."""

from __future__ import annotations

from typing import Any
from typing import Generic
from typing import TypeVar

from pydantic import AliasChoices
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

_T = TypeVar("_T")


class PaginationDescriptor(BaseModel):
  """Normalized page metadata accompanying a list result.

  The remote API sends snake_case keys; camelCase keys are accepted too.
  """

  model_config = ConfigDict(populate_by_name=True, frozen=True)

  current_page: int = Field(
    ge=0, validation_alias=AliasChoices("current_page", "currentPage")
  )
  page_size: int = Field(
    ge=0, validation_alias=AliasChoices("page_size", "pageSize")
  )
  total_pages: int = Field(
    ge=0, validation_alias=AliasChoices("total_pages", "totalPages")
  )
  total_records: int = Field(
    ge=0, validation_alias=AliasChoices("total_records", "totalRecords")
  )

  @classmethod
  def single_page(cls, record_count: int) -> PaginationDescriptor:
    """Describes one page holding every record the server returned."""
    return cls(
      current_page=1,
      page_size=record_count,
      total_pages=1,
      total_records=record_count,
    )


class NormalizedEnvelope(BaseModel):
  """The one shape every call site sees after envelope normalization."""

  model_config = ConfigDict(frozen=True)

  records: list[Any] = Field(default_factory=list)
  pagination: PaginationDescriptor


class PaginatedResult(BaseModel, Generic[_T]):
  """List result returned by ``get_list``."""

  model_config = ConfigDict(arbitrary_types_allowed=True)

  data: list[_T] = Field(default_factory=list)
  pagination: PaginationDescriptor


class ErrorBody(BaseModel):
  """Error payload shape produced by the remote API."""

  error: str = Field(min_length=1)
  details: dict[str, Any] | None = None
