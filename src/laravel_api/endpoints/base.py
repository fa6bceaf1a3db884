from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from laravel_api.api import Api
    from laravel_api.http.request import AuthedRequest


class Endpoint:
    """Binds a resource path to an :class:`Api` session.

    The binding is fixed at construction; endpoints hold no other state.
    """

    def __init__(self, api: Api, path: str) -> None:
        self._api = api
        self._path = path.rstrip("/")

    @property
    def api(self) -> Api:
        return self._api

    @property
    def path(self) -> str:
        return self._path

    def authed_request(self) -> AuthedRequest:
        return self._api.authed_request(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r})"
