"""In-process async client for exercising an ``HttpRouter`` over ASGI.

Requests never touch a socket: each call builds an HTTP scope, feeds the
body through ``receive``, and collects what the router ``send``s back
into a ``Response``.
"""

from httprouter._internal.asgi import Message, RawHeaders, Scope, decode_headers, encode_headers
from httprouter.http.response import Response
from httprouter.router import HttpRouter

HeaderArg = dict[str, str] | None


def build_scope(method: str, path: str, headers: HeaderArg = None) -> Scope:
    """An ASGI 3.0 HTTP scope for *method* and *path* (query string allowed)."""
    path_part, _, query = path.partition("?")
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method.upper(),
        "scheme": "http",
        "path": path_part,
        "raw_path": path_part.encode("latin-1"),
        "query_string": query.encode("latin-1"),
        "root_path": "",
        "headers": encode_headers((headers or {}).items()),
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 0),
    }


class TestClient:
    """Async test client.

    Usage::

        async with TestClient(router) as client:
            response = await client.get("/1/users/42")
            assert response.status == 200

    Entering the client builds the route table, so declaration errors
    surface there rather than on the first request.
    """

    __test__ = False  # not a pytest test class
    __slots__ = ("router",)

    def __init__(self, router: HttpRouter) -> None:
        self.router = router

    async def __aenter__(self) -> "TestClient":
        self.router._ensure_frozen()
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(self, path: str, *, headers: HeaderArg = None) -> Response:
        return await self.request("GET", path, headers=headers)

    async def post(self, path: str, *, headers: HeaderArg = None, body: bytes = b"") -> Response:
        return await self.request("POST", path, headers=headers, body=body)

    async def put(self, path: str, *, headers: HeaderArg = None, body: bytes = b"") -> Response:
        return await self.request("PUT", path, headers=headers, body=body)

    async def patch(self, path: str, *, headers: HeaderArg = None, body: bytes = b"") -> Response:
        return await self.request("PATCH", path, headers=headers, body=body)

    async def delete(self, path: str, *, headers: HeaderArg = None) -> Response:
        return await self.request("DELETE", path, headers=headers)

    async def options(self, path: str, *, headers: HeaderArg = None) -> Response:
        return await self.request("OPTIONS", path, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: HeaderArg = None,
        body: bytes = b"",
    ) -> Response:
        """Send one request through the router and collect its response."""
        pending: list[Message] = [{"type": "http.request", "body": body, "more_body": False}]
        sent: list[Message] = []

        async def receive() -> Message:
            if pending:
                return pending.pop()
            return {"type": "http.disconnect"}

        async def send(message: Message) -> None:
            sent.append(message)

        await self.router(build_scope(method, path, headers), receive, send)
        return _collect(sent)


def _collect(messages: list[Message]) -> Response:
    status = 200
    raw: RawHeaders = []
    chunks: list[bytes] = []
    for message in messages:
        if message["type"] == "http.response.start":
            status = message["status"]
            raw = list(message.get("headers", []))
        elif message["type"] == "http.response.body":
            chunks.append(message.get("body", b""))

    content_type = "text/plain; charset=utf-8"
    extra: list[tuple[str, str]] = []
    for name, value in decode_headers(raw):
        if name == "content-type":
            content_type = value
        elif name != "content-length":
            extra.append((name, value))
    return Response(body=b"".join(chunks), status=status, content_type=content_type, headers=tuple(extra))
