"""
Domain error taxonomy for the catalog service.

A single exception type tagged with a closed ErrorKind. The HTTP status code is
derived from the kind by status_code_of(), so the error responder can map every
typed failure without inspecting subclasses.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
INTERNAL_ERROR_STATUS = 500


class ErrorKind(str, Enum):
    """Kinds of domain failure. Values are the names exposed in error envelopes."""
    NOT_FOUND = "NotFoundError"
    VALIDATION = "ValidationError"
    AUTHENTICATION = "AuthenticationError"


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTHENTICATION: 401,
}


def status_code_of(kind: ErrorKind) -> int:
    """Return the HTTP status code for an error kind."""
    return _STATUS_CODES[kind]


class DomainError(Exception):
    """A classified failure carrying its kind and a human-readable message."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self._kind = ErrorKind(kind)
        self._message = message

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def name(self) -> str:
        return self._kind.value

    @property
    def status_code(self) -> int:
        return status_code_of(self._kind)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "statusCode": self.status_code,
        }

    def __repr__(self) -> str:
        return f"DomainError(kind={self._kind.name}, message={self._message!r})"


def not_found(message: str) -> DomainError:
    return DomainError(ErrorKind.NOT_FOUND, message)


def validation_failed(message: str) -> DomainError:
    return DomainError(ErrorKind.VALIDATION, message)


def authentication_failed(message: str = "Invalid or missing API key") -> DomainError:
    return DomainError(ErrorKind.AUTHENTICATION, message)


def untyped_name(exc: BaseException) -> str:
    """
    Envelope name for a non-domain exception.

    Built-in exceptions keep their bare name (RuntimeError); library and
    application exceptions are module-qualified, so e.g. pydantic's
    ValidationError never reads like the domain ValidationError kind.
    """
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def describe_untyped(exc: BaseException) -> Dict[str, Any]:
    """
    Describe a failure that is not a DomainError.

    Untyped faults always map to 500; the message falls back to
    "Internal Server Error" when the exception carries none.
    """
    return {
        "name": untyped_name(exc),
        "message": str(exc) or INTERNAL_ERROR_MESSAGE,
        "statusCode": INTERNAL_ERROR_STATUS,
    }
