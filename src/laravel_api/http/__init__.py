"""Request building on top of httpx."""

from __future__ import annotations

from laravel_api.http.query import flatten_query_params
from laravel_api.http.request import AuthedRequest, receive_json

__all__ = ["AuthedRequest", "flatten_query_params", "receive_json"]
