"""Entity API Mock Server.

FastAPI application serving the resource collections consumed by the
entity-access layer, each in a different response envelope:

    /api/rooms     bare list
    /api/groups    {"data": [...], "pagination": {...}}
    /api/students  {"success": true, "data": {"data": [...], "pagination": {...}}}

Start with:
    uvicorn mock_servers.entity_mock.app:app --port 8080
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mock_servers.entity_mock.auth import EntityAuthMiddleware
from mock_servers.entity_mock.routes.records import build_router

RESOURCE_SHAPES = {
    "rooms": "bare",
    "groups": "wrapped",
    "students": "double",
}

app = FastAPI(
    title="Entity API Mock",
    description="Mock of the admin backend's resource endpoints",
    version="0.1.0-mock",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Auth
app.add_middleware(EntityAuthMiddleware)

# Routes
for _table, _shape in RESOURCE_SHAPES.items():
    app.include_router(build_router(_table, _shape))


@app.get("/")
async def root():
    return {
        "type": "mock",
        "name": "Entity API Mock",
        "endpoints": [f"/api/{table}" for table in RESOURCE_SHAPES],
    }


@app.get("/health")
async def health():
    return {"status": "ok"}
