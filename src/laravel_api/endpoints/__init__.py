"""CRUD endpoint abstractions."""

from __future__ import annotations

from laravel_api.endpoints.base import Endpoint
from laravel_api.endpoints.crud import BaseCrudEndpoint, CrudEndpoint, primary_key_of

__all__ = ["BaseCrudEndpoint", "CrudEndpoint", "Endpoint", "primary_key_of"]
