"""
Request pipeline middleware.

Order (outermost first):
- RequestLoggingMiddleware: logs method, path and UTC timestamp of every request
- ErrorBoundaryMiddleware: turns any exception a handler raised into the JSON
  error envelope, so no fault escapes as a bare 500
"""
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request as StarletteRequest
from starlette.responses import Response as StarletteResponse

from catalog.api.errors import error_response, request_target
from catalog.utils.logger import get_logger

logger = get_logger("api.middleware")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: StarletteRequest, call_next) -> StarletteResponse:
        timestamp = datetime.now(timezone.utc).isoformat()
        logger.info(f"[{timestamp}] {request.method} {request_target(request)}")
        return await call_next(request)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Forward failures that no exception handler resolved to the error responder."""

    async def dispatch(self, request: StarletteRequest, call_next) -> StarletteResponse:
        try:
            return await call_next(request)
        except Exception as exc:
            return error_response(exc)
