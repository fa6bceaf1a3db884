"""Typed async client for Laravel-style RESTful CRUD resources."""

from __future__ import annotations

from laravel_api.api import Api
from laravel_api.endpoints import BaseCrudEndpoint, CrudEndpoint, Endpoint
from laravel_api.exceptions import (
    ApiError,
    ApiTimeoutError,
    AuthenticationError,
    AuthorizationError,
    DeserializationError,
    ErrorKind,
    HttpError,
    NotFoundError,
    TransportError,
    ValidationFailedError,
)
from laravel_api.schemas.contracts import (
    CollectionResponseContract,
    IndexedResource,
    ResponseContract,
)
from laravel_api.schemas.generic import CollectionResponse, Resource, Response

__version__ = "0.1.0"

__all__ = [
    "Api",
    "ApiError",
    "ApiTimeoutError",
    "AuthenticationError",
    "AuthorizationError",
    "BaseCrudEndpoint",
    "CollectionResponse",
    "CollectionResponseContract",
    "CrudEndpoint",
    "DeserializationError",
    "Endpoint",
    "ErrorKind",
    "HttpError",
    "IndexedResource",
    "NotFoundError",
    "Resource",
    "Response",
    "ResponseContract",
    "TransportError",
    "ValidationFailedError",
]
