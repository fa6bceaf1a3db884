"""Normalized errors raised by :meth:`laravel_api.api.Api.wrap`."""

from __future__ import annotations

from enum import Enum

import httpx


class ErrorKind(Enum):
    """Where a failure originated."""

    TRANSPORT = "transport"
    HTTP = "http"
    DESERIALIZATION = "deserialization"


class ApiError(Exception):
    """Base class for every failure surfaced by the client.

    Args:
        message: Human-readable description, the server's message when it sent one.
        kind: Whether the failure is transport, HTTP status or deserialization level.
        status_code: HTTP status of the response, if one was received.
        cause: The underlying exception, kept for diagnostics.
        response: The received response, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        status_code: int | None = None,
        cause: BaseException | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.cause = cause
        self.response = response

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, kind={self.kind.value}, "
            f"status_code={self.status_code})"
        )


class TransportError(ApiError):
    """Connection refused, DNS failure, protocol error and the like."""


class ApiTimeoutError(TransportError, TimeoutError):
    """The request did not complete within the configured timeout."""


class DeserializationError(ApiError):
    """The response body does not match the expected shape."""


class HttpError(ApiError):
    """The backend answered with a 4xx or 5xx status."""


class AuthenticationError(HttpError):
    """401: missing or invalid credentials."""


class AuthorizationError(HttpError):
    """403: credentials valid but not allowed."""


class NotFoundError(HttpError):
    """404: no resource at the requested path."""


class ValidationFailedError(HttpError):
    """422: Laravel rejected the payload.

    ``errors`` maps field names to the messages Laravel reported for them.
    """

    def __init__(self, message: str, *, errors: dict[str, list[str]] | None = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.errors = errors or {}


_STATUS_ERRORS: dict[int, type[HttpError]] = {
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    422: ValidationFailedError,
}


def http_error_class(status_code: int) -> type[HttpError]:
    return _STATUS_ERRORS.get(status_code, HttpError)
