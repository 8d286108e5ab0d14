"""Generic record endpoints, one router per resource table.

Implements, for a table mounted at ``/api/<table>``:
    GET    /api/<table>?<field>=<value>&page=1&page_size=10
    GET    /api/<table>/{id}
    POST   /api/<table>
    PUT    /api/<table>/{id}
    PATCH  /api/<table>/{id}
    DELETE /api/<table>/{id}

Each table answers in one of the three envelope shapes the real backend
uses, so clients can be exercised against all of them.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response

from mock_servers.entity_mock.db import get_db, paginate
from mock_servers.entity_mock.models import EnvelopeShape, RecordWrite

_PAGING_PARAMS = {"page", "page_size"}


def _wrap_list(shape: EnvelopeShape, records: list[dict], pagination: dict[str, Any]) -> Any:
    if shape == "bare":
        return records
    if shape == "wrapped":
        return {"data": records, "pagination": pagination}
    return {
        "success": True,
        "message": "Records retrieved successfully",
        "data": {"data": records, "pagination": pagination},
    }


def _wrap_record(shape: EnvelopeShape, record: dict) -> Any:
    if shape == "bare":
        return record
    if shape == "wrapped":
        return {"data": record}
    return {"success": True, "message": "OK", "data": record}


def _not_found(table: str, record_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=f"{table} record with id '{record_id}' not found",
    )


def build_router(table: str, shape: EnvelopeShape) -> APIRouter:
    router = APIRouter(prefix=f"/api/{table}", tags=[table])

    @router.get("")
    async def list_records(request: Request, page: int = 1, page_size: int = 50):
        if page < 1 or page_size < 1:
            raise HTTPException(status_code=400, detail="page and page_size must be positive")
        filters = {
            key: value
            for key, value in request.query_params.items()
            if key not in _PAGING_PARAMS
        }
        records = get_db().query(table, filters)
        if shape == "bare":
            return records
        page_records, pagination = paginate(records, page, page_size)
        return _wrap_list(shape, page_records, pagination)

    @router.get("/{record_id}")
    async def get_record(record_id: str):
        record = get_db().get(table, record_id)
        if record is None:
            raise _not_found(table, record_id)
        return _wrap_record(shape, record)

    @router.post("", status_code=201)
    async def create_record(body: RecordWrite):
        record = get_db().insert(table, body.model_dump(exclude_none=True))
        return _wrap_record(shape, record)

    @router.put("/{record_id}")
    @router.patch("/{record_id}")
    async def update_record(record_id: str, body: RecordWrite):
        record = get_db().update(table, record_id, body.model_dump(exclude_none=True))
        if record is None:
            raise _not_found(table, record_id)
        return _wrap_record(shape, record)

    @router.delete("/{record_id}", status_code=204)
    async def delete_record(record_id: str):
        if not get_db().delete(table, record_id):
            raise _not_found(table, record_id)
        return Response(status_code=204)

    return router
