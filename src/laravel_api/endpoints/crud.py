"""Generic CRUD endpoints over Laravel resource routes.

``GET {path}``, ``GET {path}/{key}``, ``POST {path}``, ``PUT {path}/{key}`` and
``DELETE {path}/{key}``. Every ``*_response`` method performs the request;
the plain method awaits it and unwraps ``.data``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar
from uuid import UUID

import httpx

from laravel_api.endpoints.base import Endpoint
from laravel_api.http.request import receive_json
from laravel_api.schemas.contracts import (
    CollectionResponseContract,
    IndexedResource,
    ResponseContract,
)
from laravel_api.schemas.generic import CollectionResponse, Response

if TYPE_CHECKING:
    from laravel_api.api import Api

T = TypeVar("T")
C = TypeVar("C", bound=CollectionResponseContract)
S = TypeVar("S", bound=ResponseContract)

PRIMARY_KEY_TYPES = (str, int, UUID)


def primary_key_of(key_or_resource: Any) -> Any:
    """Return the primary key of a resource, or the value itself if it is a key."""
    pkey = key_or_resource
    if isinstance(key_or_resource, IndexedResource):
        pkey = key_or_resource.primary_key_value
    if pkey is None:
        raise ValueError("Resource has no primary key; store it before addressing it")
    if isinstance(pkey, bool) or not isinstance(pkey, PRIMARY_KEY_TYPES):
        raise TypeError(
            f"Expected a primary key (str, int or UUID) or a resource exposing "
            f"primary_key_value, got {type(pkey).__name__}"
        )
    return pkey


class BaseCrudEndpoint(Endpoint, Generic[T, C, S]):
    """CRUD endpoint for resource ``T`` with collection shape ``C`` and single shape ``S``.

    Args:
        api: Session every request goes through.
        path: Resource path relative to the API root (e.g. "posts").
        collection_response_type: Type the index body is validated into.
        response_type: Type show/store/update bodies are validated into.
    """

    def __init__(
        self,
        api: Api,
        path: str,
        *,
        collection_response_type: type[C],
        response_type: type[S],
    ) -> None:
        super().__init__(api, path)
        self._collection_response_type = collection_response_type
        self._response_type = response_type

    @property
    def collection_response_type(self) -> type[C]:
        return self._collection_response_type

    @property
    def response_type(self) -> type[S]:
        return self._response_type

    async def index(self, query_params: Any = None) -> list[T]:
        """List the resources, optionally filtered by ``query_params``."""
        return list((await self.index_response(query_params)).data)

    async def index_response(self, query_params: Any = None) -> C:
        async def _call() -> C:
            response = await self.authed_request().set_query_params(query_params).get()
            return receive_json(response, self._collection_response_type)

        return await self._api.wrap(_call)

    async def show(self, key_or_resource: Any) -> T:
        """Fetch one resource by primary key, or re-fetch an already fetched one."""
        return (await self.show_response(key_or_resource)).data

    async def show_response(self, key_or_resource: Any) -> S:
        pkey = primary_key_of(key_or_resource)

        async def _call() -> S:
            response = await self.authed_request().append_path_segment(pkey).get()
            return receive_json(response, self._response_type)

        return await self._api.wrap(_call)

    async def store(self, resource: T) -> T:
        """Create ``resource``. The server's copy is returned; ``resource`` is left as is."""
        return (await self.store_response(resource)).data

    async def store_response(self, resource: T) -> S:
        async def _call() -> S:
            response = await self.authed_request().post_json(resource)
            return receive_json(response, self._response_type)

        return await self._api.wrap(_call)

    async def update(self, resource: T) -> T:
        """Replace the server state of ``resource`` with the local one."""
        return (await self.update_response(resource)).data

    async def update_response(self, resource: T) -> S:
        if not isinstance(resource, IndexedResource):
            raise TypeError(f"{type(resource).__name__} does not expose primary_key_value")
        pkey = primary_key_of(resource)

        async def _call() -> S:
            response = await self.authed_request().append_path_segment(pkey).put_json(resource)
            return receive_json(response, self._response_type)

        return await self._api.wrap(_call)

    async def destroy(self, key_or_resource: Any) -> httpx.Response:
        """Delete a resource by primary key or by instance.

        Laravel sends no data on destroy, so the raw response is returned and
        any body it carries is ignored.
        """
        pkey = primary_key_of(key_or_resource)

        async def _call() -> httpx.Response:
            return await self.authed_request().append_path_segment(pkey).delete()

        return await self._api.wrap(_call)


class CrudEndpoint(BaseCrudEndpoint[T, CollectionResponse[T], Response[T]]):
    """:class:`BaseCrudEndpoint` using the default ``{"data": ...}`` envelopes."""

    def __init__(self, api: Api, path: str, resource_type: type[T]) -> None:
        super().__init__(
            api,
            path,
            collection_response_type=CollectionResponse[resource_type],
            response_type=Response[resource_type],
        )
        self._resource_type = resource_type

    @property
    def resource_type(self) -> type[T]:
        return self._resource_type
