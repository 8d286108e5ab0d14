"""Response envelope normalizer.

The remote API wraps records in one of three shapes:

1. a bare list of records;
2. ``{"data": [...], "pagination": {...}}`` (pagination optional);
3. ``{"success": true, "data": {"data": [...], "pagination": {...}}}``.

Single-record endpoints additionally answer with the record itself or with
``{"data": {...}}``. Everything is collapsed here, once, into
``NormalizedEnvelope`` so no caller has to sniff shapes.
"""
from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from entity_access.errors import NormalizationError
from entity_access.schemas import NormalizedEnvelope, PaginationDescriptor


def _describe(value: Any) -> str:
    if isinstance(value, dict):
        return f"object with keys {sorted(value)}"
    return type(value).__name__


def _is_double_wrapped(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and isinstance(value.get("success"), bool)
        and isinstance(value.get("data"), dict)
        and "data" in value["data"]
    )


def _unwrap(value: Any) -> tuple[Any, Any]:
    """Peels envelope layers; returns ``(payload, raw_pagination)``."""
    if _is_double_wrapped(value):
        value = value["data"]

    if isinstance(value, dict) and "data" in value:
        data = value["data"]
        pagination = value.get("pagination")
        if isinstance(data, dict) and "data" in data:
            pagination = data.get("pagination", pagination)
            data = data["data"]
        return data, pagination

    return value, None


def _parse_pagination(raw: Any, record_count: int, body: Any) -> PaginationDescriptor:
    if raw is None:
        return PaginationDescriptor.single_page(record_count)
    try:
        return PaginationDescriptor.model_validate(raw)
    except ValidationError as exc:
        raise NormalizationError(
            f"Invalid pagination descriptor in response: {exc.error_count()} error(s)",
            body=body,
        ) from exc


def normalize_list(body: Any) -> NormalizedEnvelope:
    """Normalizes a list response; raises instead of returning nothing."""
    if isinstance(body, list):
        return NormalizedEnvelope(
            records=body,
            pagination=PaginationDescriptor.single_page(len(body)),
        )

    if body is None:
        raise NormalizationError(
            "Expected a list response but no JSON body was returned", body=body
        )

    records, raw_pagination = _unwrap(body)
    if not isinstance(records, list):
        raise NormalizationError(
            f"Unexpected list response structure: {_describe(body)}"
            f" (records resolved to {_describe(records)})",
            body=body,
        )

    return NormalizedEnvelope(
        records=records,
        pagination=_parse_pagination(raw_pagination, len(records), body),
    )


def normalize_record(body: Any) -> Any:
    """Extracts the single record from a get/create/update response."""
    if body is None:
        raise NormalizationError("Expected a record but no JSON body was returned", body=body)

    record, _ = _unwrap(body)
    if record is None or isinstance(record, list):
        raise NormalizationError(
            f"Unexpected record response structure: {_describe(body)}",
            body=body,
        )
    return record
