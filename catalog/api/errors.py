"""
Terminal error responder.

Every failure, typed or not, ends up here and is rendered as
{"error": {"name", "message", "statusCode"}} with the matching HTTP status.
This is the only place failure status codes are decided.
"""
from typing import Any, Dict, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.api.models import ErrorResponse
from catalog.core.errors import DomainError, describe_untyped, not_found, validation_failed
from catalog.utils.logger import get_logger

logger = get_logger("api.errors")

# Starlette raises these when no route matches the request
_UNMATCHED_ROUTE_STATUSES = (404, 405)


def request_target(request: Request) -> str:
    """Path plus query string, as sent by the client."""
    target = request.url.path
    if request.url.query:
        target += f"?{request.url.query}"
    return target


def route_not_found(request: Request) -> DomainError:
    return not_found(f"Route {request.method} {request_target(request)} not found")


def error_payload(exc: BaseException) -> Tuple[int, Dict[str, Any]]:
    """Resolve the status code and error body for any exception."""
    if isinstance(exc, DomainError):
        detail = exc.to_dict()
    else:
        detail = describe_untyped(exc)
    return detail["statusCode"], detail


def error_response(exc: BaseException) -> JSONResponse:
    """Log the failure and render the JSON error envelope."""
    status_code, detail = error_payload(exc)

    if isinstance(exc, DomainError):
        logger.error(f"[ERROR] {detail['name']}: {detail['message']}")
    else:
        logger.error(f"[ERROR] {detail['name']}: {detail['message']}", exc_info=exc)

    body = ErrorResponse.model_validate({"error": detail})
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report FastAPI parameter validation failures as validation errors."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg', 'invalid value')}")
    return error_response(validation_failed("; ".join(messages) or "Invalid request"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unmatched routes become NotFound errors; other HTTP exceptions keep their status."""
    if exc.status_code in _UNMATCHED_ROUTE_STATUSES:
        return error_response(route_not_found(request))

    logger.error(f"[ERROR] HTTPException: {exc.detail}")
    body = ErrorResponse.model_validate({
        "error": {
            "name": "HTTPException",
            "message": str(exc.detail),
            "statusCode": exc.status_code,
        }
    })
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(by_alias=True),
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error responder to a FastAPI application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
