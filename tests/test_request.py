"""Tests for httprouter.http.request and httprouter._internal.invoke."""

import pytest

from httprouter._internal.invoke import invoke
from httprouter.http.request import Request, RouteDetails


def _scope(**overrides: object) -> dict:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/1/pages/3",
        "headers": [(b"x-token", b"abc")],
        "query_string": b"q=1",
        "http_version": "2",
    }
    scope.update(overrides)
    return scope


class TestFromAsgi:
    def test_fields(self) -> None:
        route = RouteDetails(handler=object, action="show", method="GET", path="/1/pages/:page_id")
        request = Request.from_asgi(_scope(), path_params={"page_id": "3"}, route=route)
        assert request.method == "GET"
        assert request.path == "/1/pages/3"
        assert request.headers["X-Token"] == "abc"
        assert request.query_string == b"q=1"
        assert request.http_version == "2"
        assert request.path_params == {"page_id": "3"}
        assert request.route is route

    def test_defaults(self) -> None:
        request = Request.from_asgi({"method": "GET", "path": "/"})
        assert request.path_params == {}
        assert request.route is None
        assert request.http_version == "1.1"


class TestBody:
    @pytest.mark.asyncio
    async def test_chunks_joined_and_cached(self) -> None:
        messages = iter(
            [
                {"type": "http.request", "body": b"hel", "more_body": True},
                {"type": "http.request", "body": b"lo", "more_body": False},
            ]
        )

        async def receive() -> dict:
            return next(messages)

        request = Request.from_asgi(_scope(), receive)
        assert await request.body() == b"hello"
        assert await request.body() == b"hello"

    @pytest.mark.asyncio
    async def test_no_receive(self) -> None:
        assert await Request.from_asgi(_scope()).body() == b""


class TestInvoke:
    @pytest.mark.asyncio
    async def test_sync(self) -> None:
        assert await invoke(lambda a, *, b: a + b, (1,), {"b": 2}) == 3

    @pytest.mark.asyncio
    async def test_async(self) -> None:
        async def handler(value: str) -> str:
            return value.upper()

        assert await invoke(handler, ("x",)) == "X"

    @pytest.mark.asyncio
    async def test_in_thread(self) -> None:
        assert await invoke(lambda value: value * 2, (21,), in_thread=True) == 42

    @pytest.mark.asyncio
    async def test_keyword_names_reach_handler(self) -> None:
        def handler(request: str, *, handler: str, in_thread: str) -> str:
            return f"{request}:{handler}:{in_thread}"

        kwargs = {"handler": "h", "in_thread": "t"}
        assert await invoke(handler, ("r",), kwargs, in_thread=True) == "r:h:t"
