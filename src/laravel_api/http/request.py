"""Immutable request builder bound to an httpx client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import quote
from uuid import uuid4

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from laravel_api.exceptions import DeserializationError, ErrorKind
from laravel_api.http.query import QueryValue, flatten_query_params

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _json_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    if isinstance(body, Mapping):
        body = dict(body)
    # dataclasses, datetimes, UUIDs and the like come out JSON-ready
    return _adapter(type(body)).dump_python(body, mode="json")


class AuthedRequest:
    """A request to one resource path with credentials already attached.

    Builder methods return a new instance; the receiver is never modified, so
    a request can be shared as a template between calls.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, QueryValue] | None = None,
        request_id_header: str = "X-Request-ID",
    ) -> None:
        self._client = client
        self._path = path
        self._headers = dict(headers or {})
        self._params = dict(params or {})
        self._request_id_header = request_id_header

    @property
    def url(self) -> str:
        return self._path

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def params(self) -> dict[str, QueryValue]:
        return dict(self._params)

    def _replace(self, **changes: Any) -> AuthedRequest:
        fields = {
            "path": self._path,
            "headers": self._headers,
            "params": self._params,
            "request_id_header": self._request_id_header,
        }
        fields.update(changes)
        return AuthedRequest(self._client, **fields)

    def append_path_segment(self, segment: Any) -> AuthedRequest:
        """Append ``segment`` as exactly one path segment (``/`` is escaped)."""
        encoded = quote(str(segment), safe="")
        return self._replace(path=f"{self._path.rstrip('/')}/{encoded}")

    def set_query_params(self, params: Any) -> AuthedRequest:
        """Merge query parameters taken from a mapping, model, dataclass or plain object."""
        merged = dict(self._params)
        merged.update(flatten_query_params(params))
        return self._replace(params=merged)

    def with_headers(self, headers: Mapping[str, str]) -> AuthedRequest:
        merged = dict(self._headers)
        merged.update(headers)
        return self._replace(headers=merged)

    async def send(self, method: str, *, json: Any = None) -> httpx.Response:
        """Send the request and raise ``httpx.HTTPStatusError`` on a non-2xx status."""
        headers = httpx.Headers(self._headers)
        if self._request_id_header not in headers:
            headers[self._request_id_header] = str(uuid4())

        logger.debug(
            "%s %s params=%s request_id=%s",
            method,
            self._path,
            self._params,
            headers[self._request_id_header],
        )
        response = await self._client.request(
            method,
            self._path,
            params=self._params or None,
            json=_json_body(json) if json is not None else None,
            headers=headers,
        )
        response.raise_for_status()
        return response

    async def get(self) -> httpx.Response:
        return await self.send("GET")

    async def post_json(self, body: Any) -> httpx.Response:
        return await self.send("POST", json=body)

    async def put_json(self, body: Any) -> httpx.Response:
        return await self.send("PUT", json=body)

    async def delete(self) -> httpx.Response:
        return await self.send("DELETE")

    def __repr__(self) -> str:
        return f"AuthedRequest(url={self._path!r}, params={self._params!r})"


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def receive_json(response: httpx.Response, shape: type[R]) -> R:
    """Validate the JSON body of ``response`` into ``shape``.

    Raises:
        DeserializationError: The body is not JSON or does not match ``shape``.
    """
    try:
        return _adapter(shape).validate_json(response.content)
    except ValidationError as exc:
        raise DeserializationError(
            f"Response from {response.request.method} {response.request.url} "
            f"does not match {getattr(shape, '__name__', shape)}",
            kind=ErrorKind.DESERIALIZATION,
            status_code=response.status_code,
            cause=exc,
            response=response,
        ) from exc
