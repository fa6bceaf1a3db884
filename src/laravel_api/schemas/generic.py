"""Default response envelopes for Laravel API resources."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Resource(BaseModel):
    """Base model for resources addressed by a primary key.

    Subclasses whose key is not ``id`` override ``primary_key_name``.
    """

    primary_key_name: ClassVar[str] = "id"

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def primary_key_value(self) -> Any:
        return getattr(self, self.primary_key_name, None)


class PaginationLinks(BaseModel):
    first: str | None = None
    last: str | None = None
    prev: str | None = None
    next: str | None = None


class PaginationMeta(BaseModel):
    current_page: int
    from_: int | None = Field(default=None, alias="from")
    last_page: int
    path: str | None = None
    per_page: int
    to: int | None = None
    total: int

    model_config = ConfigDict(populate_by_name=True)


class CollectionResponse(BaseModel, Generic[T]):
    """``{"data": [...]}`` envelope, with pagination when the backend paginates."""

    data: list[T]
    links: PaginationLinks | None = None
    meta: PaginationMeta | None = None


class Response(BaseModel, Generic[T]):
    """``{"data": {...}}`` envelope."""

    data: T


class ErrorBody(BaseModel):
    """Standard Laravel error body (422 responses also carry ``errors``)."""

    message: str = ""
    errors: dict[str, list[str]] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")
