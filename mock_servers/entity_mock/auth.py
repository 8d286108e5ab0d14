"""Authentication middleware for the entity API mock server.

The real backend validates short-lived session JWTs. For the mock: accept
any `Authorization: Bearer mock-entity-token-*` header.
"""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from entity_access.schemas import ErrorBody


# Paths that don't require auth
PUBLIC_PATHS = {"/", "/health", "/docs", "/openapi.json", "/redoc"}

TOKEN_PREFIX = "mock-entity-token-"


def _auth_error(error: str) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content=ErrorBody(error=error).model_dump(exclude_none=True),
    )


class EntityAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in PUBLIC_PATHS or request.url.path.startswith("/docs"):
            return await call_next(request)

        auth_header = request.headers.get("Authorization", "")

        if not auth_header:
            return _auth_error("Missing Authorization header")

        if not auth_header.startswith("Bearer "):
            return _auth_error("Invalid Authorization scheme")

        token = auth_header[len("Bearer "):]
        if not token.startswith(TOKEN_PREFIX):
            return _auth_error("Invalid or expired token")

        return await call_next(request)
