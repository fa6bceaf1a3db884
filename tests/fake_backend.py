"""In-process fake of a Laravel resource controller, served via ASGITransport.

Mirrors what ``php artisan make:controller --api`` plus API resources return:
``{"data": ...}`` envelopes, length-aware pagination on index, 204 on
destroy, and Laravel-shaped 401/404/422 error bodies.
"""

from __future__ import annotations

import copy
import json
import math
from dataclasses import dataclass, field
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

VALID_TOKEN = "test-token"


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: str
    headers: dict[str, str]
    body: Any = None


@dataclass
class FakeLaravelBackend:
    """Holds the posts table and a log of every request the routes received."""

    posts: dict[int, dict[str, Any]] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)
    per_page: int = 15
    destroy_body: dict[str, Any] | None = None
    _next_id: int = 1

    def __post_init__(self) -> None:
        self.app = self._build_app()

    def seed(self, **attributes: Any) -> dict[str, Any]:
        post = {"id": self._next_id, "body": "", "status": "draft", **attributes}
        self.posts[self._next_id] = post
        self._next_id += 1
        return post

    async def _record(self, request: Request) -> Any:
        raw = await request.body()
        body = json.loads(raw) if raw else None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                query=request.url.query,
                headers=dict(request.headers),
                body=copy.deepcopy(body),
            )
        )
        return body

    def _build_app(self) -> FastAPI:
        backend = self

        def require_token(request: Request) -> None:
            if request.headers.get("authorization") != f"Bearer {VALID_TOKEN}":
                raise _Unauthenticated()

        app = FastAPI()

        @app.exception_handler(_Unauthenticated)
        async def unauthenticated(request: Request, exc: _Unauthenticated) -> JSONResponse:
            await backend._record(request)
            return JSONResponse({"message": "Unauthenticated."}, status_code=401)

        router = APIRouter(prefix="/api", dependencies=[Depends(require_token)])

        def not_found(post_id: Any) -> JSONResponse:
            return JSONResponse(
                {"message": f"No query results for model [App\\Models\\Post] {post_id}"},
                status_code=404,
            )

        @router.get("/posts")
        async def index_posts(request: Request) -> JSONResponse:
            await backend._record(request)
            params = dict(request.query_params)
            page = int(params.pop("page", 1))
            items = [
                post
                for post in backend.posts.values()
                if all(str(post.get(key)) == value for key, value in params.items())
            ]
            total = len(items)
            last_page = max(math.ceil(total / backend.per_page), 1)
            offset = (page - 1) * backend.per_page
            data = items[offset : offset + backend.per_page]
            base = str(request.url.replace(query=""))
            return JSONResponse(
                {
                    "data": data,
                    "links": {
                        "first": f"{base}?page=1",
                        "last": f"{base}?page={last_page}",
                        "prev": f"{base}?page={page - 1}" if page > 1 else None,
                        "next": f"{base}?page={page + 1}" if page < last_page else None,
                    },
                    "meta": {
                        "current_page": page,
                        "from": offset + 1 if data else None,
                        "last_page": last_page,
                        "path": base,
                        "per_page": backend.per_page,
                        "to": offset + len(data) if data else None,
                        "total": total,
                    },
                }
            )

        @router.get("/posts/{post_id}")
        async def show_post(post_id: int, request: Request) -> JSONResponse:
            await backend._record(request)
            if post_id not in backend.posts:
                return not_found(post_id)
            return JSONResponse({"data": backend.posts[post_id]})

        @router.post("/posts")
        async def store_post(request: Request) -> JSONResponse:
            payload = await backend._record(request) or {}
            if not payload.get("title"):
                return JSONResponse(
                    {
                        "message": "The title field is required.",
                        "errors": {"title": ["The title field is required."]},
                    },
                    status_code=422,
                )
            payload.pop("id", None)
            post = backend.seed(**payload)
            return JSONResponse({"data": post}, status_code=201)

        @router.put("/posts/{post_id}")
        async def update_post(post_id: int, request: Request) -> JSONResponse:
            payload = await backend._record(request) or {}
            if post_id not in backend.posts:
                return not_found(post_id)
            payload.pop("id", None)
            backend.posts[post_id].update(payload)
            return JSONResponse({"data": backend.posts[post_id]})

        @router.delete("/posts/{post_id}")
        async def destroy_post(post_id: int, request: Request) -> Response:
            await backend._record(request)
            if post_id not in backend.posts:
                return not_found(post_id)
            del backend.posts[post_id]
            if backend.destroy_body is not None:
                return JSONResponse(backend.destroy_body)
            return Response(status_code=204)

        @router.get("/broken")
        async def index_broken(request: Request) -> JSONResponse:
            await backend._record(request)
            return JSONResponse({"message": "Server Error"}, status_code=500)

        @router.post("/broken")
        async def store_broken(request: Request) -> JSONResponse:
            await backend._record(request)
            return JSONResponse({"message": "Server Error"}, status_code=500)

        @router.api_route("/broken/{item_id}", methods=["GET", "PUT", "DELETE"])
        async def detail_broken(item_id: str, request: Request) -> JSONResponse:
            await backend._record(request)
            return JSONResponse({"message": "Server Error"}, status_code=500)

        @router.get("/malformed")
        async def index_malformed(request: Request) -> JSONResponse:
            await backend._record(request)
            return JSONResponse({"items": [], "total": 0})

        @router.get("/malformed/{item_id}")
        async def show_malformed(item_id: str, request: Request) -> PlainTextResponse:
            await backend._record(request)
            return PlainTextResponse("<html>Whoops</html>")

        app.include_router(router)
        return app


class _Unauthenticated(Exception):
    pass
