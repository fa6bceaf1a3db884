"""Query-string flattening for index filters."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

QueryValue = str | list[str]


def _encode_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _raw_params(params: Any) -> Mapping[str, Any]:
    if isinstance(params, Mapping):
        return params
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", by_alias=True, exclude_none=True)
    if dataclasses.is_dataclass(params) and not isinstance(params, type):
        return dataclasses.asdict(params)
    if hasattr(params, "__dict__"):
        return {k: v for k, v in vars(params).items() if not k.startswith("_")}
    raise TypeError(f"Cannot build query parameters from {type(params).__name__}")


def flatten_query_params(params: Any) -> dict[str, QueryValue]:
    """Turn a key/value-bearing object into a flat query-parameter dict.

    Args:
        params: None, a mapping, a pydantic model, a dataclass instance or any
            object with instance attributes.

    Returns:
        Dict of param name -> string, or list of strings for repeated keys.
        None values are omitted, so ``None`` or an all-None object yields ``{}``.
    """
    if params is None:
        return {}

    flat: dict[str, QueryValue] = {}
    for key, value in _raw_params(params).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            flat[str(key)] = [_encode_scalar(item) for item in value if item is not None]
        elif isinstance(value, (set, frozenset)):
            # unordered input; sort so the query string is stable
            flat[str(key)] = sorted(_encode_scalar(item) for item in value if item is not None)
        else:
            flat[str(key)] = _encode_scalar(value)
    return flat
