"""Immutable HTTP request handed to matched endpoints.

Body decoding is deliberately absent: endpoints that need the body read
it through ``body()`` and parse it themselves.
"""

from collections.abc import AsyncGenerator, Mapping
from dataclasses import dataclass, field
from typing import Any

from httprouter._internal.asgi import Receive, Scope
from httprouter.http.headers import Headers


@dataclass(frozen=True, slots=True)
class RouteDetails:
    """Which handler and action a request was dispatched to."""

    handler: Any
    action: str | None
    method: str
    path: str


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path_params`` holds the bindings captured by the matched route.
    ``route`` is set when ``RouterConfig.add_match_details`` is on.
    """

    method: str
    path: str
    headers: Headers
    query_string: bytes
    path_params: Mapping[str, str]
    http_version: str
    route: RouteDetails | None = None

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    _cache: dict[str, bytes] = field(default_factory=dict, repr=False, compare=False)

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    @classmethod
    def from_asgi(
        cls,
        scope: Scope,
        receive: Receive | None = None,
        *,
        path_params: Mapping[str, str] | None = None,
        route: RouteDetails | None = None,
    ) -> "Request":
        """Create a Request from an ASGI scope and receive callable."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            path_params=path_params or {},
            http_version=scope.get("http_version", "1.1"),
            route=route,
            _receive=receive,
        )
