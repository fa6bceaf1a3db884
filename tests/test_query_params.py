"""Tests for flattening index filters into query parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pytest
from pydantic import BaseModel, Field

from laravel_api.http.query import flatten_query_params


class Status(Enum):
    ACTIVE = "active"


class TestFlattenQueryParams:
    def test_none_yields_empty(self) -> None:
        assert flatten_query_params(None) == {}

    def test_mapping(self) -> None:
        assert flatten_query_params({"status": "active", "page": 2}) == {
            "status": "active",
            "page": "2",
        }

    def test_none_values_are_dropped(self) -> None:
        assert flatten_query_params({"status": None, "q": "x"}) == {"q": "x"}

    def test_booleans_use_lowercase(self) -> None:
        assert flatten_query_params({"archived": False, "pinned": True}) == {
            "archived": "false",
            "pinned": "true",
        }

    def test_enums_use_their_value(self) -> None:
        assert flatten_query_params({"status": Status.ACTIVE}) == {"status": "active"}

    def test_sequences_become_lists(self) -> None:
        assert flatten_query_params({"ids": (1, None, 3)}) == {"ids": ["1", "3"]}

    def test_sets_are_sorted(self) -> None:
        assert flatten_query_params({"tags": {"zeta", "alpha", "mid"}}) == {
            "tags": ["alpha", "mid", "zeta"]
        }

    def test_dataclass(self) -> None:
        @dataclass
        class Filters:
            status: str | None = None
            per_page: int = 20

        assert flatten_query_params(Filters(status="active")) == {
            "status": "active",
            "per_page": "20",
        }

    def test_pydantic_model_uses_aliases(self) -> None:
        class Filters(BaseModel):
            search: str | None = Field(default=None, alias="filter[search]")
            page: int | None = None

        assert flatten_query_params(Filters(**{"filter[search]": "foo"})) == {
            "filter[search]": "foo"
        }

    def test_plain_object_skips_private_attributes(self) -> None:
        class Filters:
            def __init__(self) -> None:
                self.status = "active"
                self._cache = {}

        assert flatten_query_params(Filters()) == {"status": "active"}

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="int"):
            flatten_query_params(42)
