"""Shared test fixtures."""

from __future__ import annotations

import httpx
import pytest

from laravel_api.api import Api
from laravel_api.core.config import Settings
from laravel_api.endpoints.crud import CrudEndpoint
from tests.fake_backend import VALID_TOKEN, FakeLaravelBackend
from tests.resources import Post

BASE_URL = "http://laravel.test/api"


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=BASE_URL, api_token=VALID_TOKEN)


@pytest.fixture
def backend() -> FakeLaravelBackend:
    return FakeLaravelBackend()


@pytest.fixture
async def api(backend: FakeLaravelBackend, settings: Settings):
    """Api session whose client talks to the fake backend in-process."""
    transport = httpx.ASGITransport(app=backend.app)
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as client:
        async with Api(settings, client=client) as session:
            yield session


@pytest.fixture
def posts(api: Api) -> CrudEndpoint[Post]:
    return CrudEndpoint(api, "posts", Post)


@pytest.fixture
def post_factory(backend: FakeLaravelBackend):
    """Factory fixture for seeding posts straight into the fake backend.

    Usage:
        def test_something(post_factory):
            post = post_factory(title="Hello")
    """

    def _create(title: str = "Hello", body: str = "", status: str = "draft") -> Post:
        return Post.model_validate(backend.seed(title=title, body=body, status=status))

    return _create
