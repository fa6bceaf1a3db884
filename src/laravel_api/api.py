"""API session: owns the transport, attaches credentials and normalizes errors."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

import httpx
from pydantic import ValidationError

from laravel_api.core.config import Settings, get_settings
from laravel_api.exceptions import (
    ApiError,
    ApiTimeoutError,
    DeserializationError,
    ErrorKind,
    TransportError,
    ValidationFailedError,
    http_error_class,
)
from laravel_api.http.request import AuthedRequest
from laravel_api.schemas.generic import ErrorBody

if TYPE_CHECKING:
    from laravel_api.endpoints.crud import CrudEndpoint

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")


def build_async_client(settings: Settings) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` every request of a session goes through."""
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.timeout_seconds),
        verify=settings.verify_ssl,
    )


def _error_body(response: httpx.Response) -> ErrorBody:
    try:
        return ErrorBody.model_validate_json(response.content)
    except ValidationError:
        return ErrorBody()


def normalize_error(exc: Exception) -> ApiError:
    """Map a raw httpx/pydantic failure onto the :class:`ApiError` taxonomy.

    Anything that is neither an httpx status nor a request-level failure is
    reported as a deserialization failure.
    """
    if isinstance(exc, ApiError):
        return exc

    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        body = _error_body(response)
        message = body.message or f"{response.status_code} {response.reason_phrase}".strip()
        error_class = http_error_class(response.status_code)
        kwargs = {
            "kind": ErrorKind.HTTP,
            "status_code": response.status_code,
            "cause": exc,
            "response": response,
        }
        if error_class is ValidationFailedError:
            return ValidationFailedError(message, errors=body.errors, **kwargs)
        return error_class(message, **kwargs)

    if isinstance(exc, httpx.TimeoutException):
        return ApiTimeoutError(
            f"Request timed out: {exc}", kind=ErrorKind.TRANSPORT, cause=exc
        )

    if isinstance(exc, httpx.DecodingError):
        return DeserializationError(
            f"Could not decode response body: {exc}",
            kind=ErrorKind.DESERIALIZATION,
            cause=exc,
        )

    # TransportError, TooManyRedirects and any other request-level failure
    if isinstance(exc, httpx.RequestError):
        return TransportError(
            f"Transport failure: {exc}", kind=ErrorKind.TRANSPORT, cause=exc
        )

    return DeserializationError(
        f"Could not decode response: {exc}", kind=ErrorKind.DESERIALIZATION, cause=exc
    )


class Api:
    """A session against one Laravel API.

    Args:
        settings: Connection settings. Defaults to :func:`get_settings`.
        client: An existing ``httpx.AsyncClient``. When given, the session does
            not close it; its ``base_url`` is used as the API root.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client if client is not None else build_async_client(self.settings)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    def auth_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.settings.user_agent,
        }
        headers.update(self.settings.default_headers)
        if self.settings.api_token:
            headers["Authorization"] = f"{self.settings.auth_scheme} {self.settings.api_token}"
        return headers

    def authed_request(self, path: str) -> AuthedRequest:
        """Start a request to ``path`` with the session's credentials attached."""
        return AuthedRequest(
            self._client,
            path,
            headers=self.auth_headers(),
            request_id_header=self.settings.request_id_header,
        )

    async def wrap(self, operation: Callable[[], Awaitable[R]]) -> R:
        """Run ``operation`` and re-raise any failure as an :class:`ApiError`.

        Cancellation is not intercepted.
        """
        try:
            return await operation()
        except (
            ApiError,
            httpx.HTTPStatusError,
            httpx.RequestError,
            ValidationError,
            json.JSONDecodeError,
        ) as exc:
            error = normalize_error(exc)
            logger.warning("API call failed: %r", error)
            if error is exc:
                raise
            raise error from exc

    def endpoint(self, path: str, resource_type: type[T]) -> CrudEndpoint[T]:
        """Return a :class:`CrudEndpoint` for ``resource_type`` bound to this session."""
        from laravel_api.endpoints.crud import CrudEndpoint

        return CrudEndpoint(self, path, resource_type)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Api:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
