"""Structural contracts the CRUD endpoints are generic over.

Any object with the right attributes satisfies these; the default pydantic
shapes in ``laravel_api.schemas.generic`` are one implementation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class IndexedResource(Protocol):
    """A resource addressable by a primary key."""

    @property
    def primary_key_value(self) -> Any: ...


@runtime_checkable
class CollectionResponseContract(Protocol[T_co]):
    """Wraps an ordered sequence of resources returned by an index call."""

    @property
    def data(self) -> Sequence[T_co]: ...


@runtime_checkable
class ResponseContract(Protocol[T_co]):
    """Wraps exactly one resource returned by show, store or update."""

    @property
    def data(self) -> T_co: ...
