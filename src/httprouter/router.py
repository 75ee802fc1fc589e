"""HttpRouter — declarative route registration with a frozen runtime.

Mutable during setup (route registration). Frozen the first time the
table is needed: ``dispatch()``, ``table``, or the first ASGI call.

Example::

    router = HttpRouter()

    with router.version("1"):
        router.get("/", Pages, "index")
        router.post("/pages", Pages, "create")
        router.put("/pages/:page_id", Pages, "update_first", when="page_id == 1")
        router.get("/pages/:page_id", Pages, "show")
        router.resource("users", Users, arg="user_id")

    with router.version("2"):
        router.raw("trace", "/trace", Tracer, "trace")
        router.resource("groups", Groups, only=("index", "show"))
"""

import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from httprouter._internal.asgi import Receive, Scope, Send
from httprouter.config import RouterConfig
from httprouter.errors import ConfigurationError, InvalidPatternError
from httprouter.routing.declarations import (
    ACTIONS,
    Declaration,
    OptionsDeclaration,
    ResourceDeclaration,
    RouteDeclaration,
    VersionGroup,
)
from httprouter.routing.dispatcher import Dispatcher
from httprouter.routing.guards import Guard
from httprouter.routing.route import ANY, NotFound, RouteMatch, normalize_method
from httprouter.routing.table import RouteTable, RouteTableBuilder
from httprouter.server.handler import handle_request

REQUEST_ARG = "request"

Path = str | Sequence[str]
GuardSource = str | Guard | None


class HttpRouter:
    """The route declaration surface and its compiled runtime.

    Thread safety:
        Registration is single-threaded (module import time). The freeze
        transition uses a Lock + double-check so exactly one thread builds
        the table; afterwards the table and dispatcher are read-only and
        shared without locking.
    """

    __slots__ = ("_dispatcher", "_freeze_lock", "_frozen", "_groups", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        # Stack of open declaration lists; [0] is the top level, the rest are
        # version groups currently being declared.
        self._groups: list[tuple[str | None, list[Declaration]]] = [(None, [])]
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._dispatcher: Dispatcher | None = None

    # -- Verb helpers --

    def get(self, path: Path, handler: Any = None, action: str | None = None, *, when: GuardSource = None) -> Any:
        """Declare a ``GET`` route. Without *handler*, returns a decorator."""
        return self._route("GET", path, handler, action, when)

    def post(self, path: Path, handler: Any = None, action: str | None = None, *, when: GuardSource = None) -> Any:
        return self._route("POST", path, handler, action, when)

    def put(self, path: Path, handler: Any = None, action: str | None = None, *, when: GuardSource = None) -> Any:
        return self._route("PUT", path, handler, action, when)

    def patch(self, path: Path, handler: Any = None, action: str | None = None, *, when: GuardSource = None) -> Any:
        return self._route("PATCH", path, handler, action, when)

    def delete(self, path: Path, handler: Any = None, action: str | None = None, *, when: GuardSource = None) -> Any:
        return self._route("DELETE", path, handler, action, when)

    def any(self, path: Path, handler: Any = None, action: str | None = None, *, when: GuardSource = None) -> Any:
        """Declare a route that matches every HTTP method."""
        return self._route(ANY, path, handler, action, when)

    def raw(
        self,
        method: str,
        path: Path,
        handler: Any = None,
        action: str | None = None,
        *,
        when: GuardSource = None,
    ) -> Any:
        """Declare a route for a custom HTTP method (``TRACE``, ``PROPFIND``, ...)."""
        token = normalize_method(method)
        if token == ANY:
            msg = f"raw() cannot declare method {method!r}; use any() to match every method"
            raise ConfigurationError(msg)
        return self._route(token, path, handler, action, when)

    def options(self, path: Path, allow: str) -> None:
        """Answer ``OPTIONS path`` with ``200`` and the given Allow header."""
        self._declare(OptionsDeclaration(_freeze_path(path), allow))

    def resource(
        self,
        name: str,
        handler: Any,
        *,
        arg: str = "id",
        only: Sequence[str] = ACTIONS,
        prepend_path: str | None = None,
    ) -> None:
        """Declare the RESTful route set for *name*.

        Actions: ``index``, ``create``, ``show``, ``update``, ``patch``,
        ``delete``. ``only`` restricts the set; ``arg`` names the member
        path variable.
        """
        self._declare(
            ResourceDeclaration(
                name=name,
                handler=handler,
                arg=arg,
                only=tuple(only),
                prepend_path=prepend_path,
            )
        )

    @contextmanager
    def version(self, version: str) -> Iterator["HttpRouter"]:
        """Group the routes declared inside the block under ``/<version>``.

        Groups nest; ``version("1")`` around ``version("beta")`` yields
        paths under ``/1/beta``.
        """
        self._check_not_frozen()
        self._groups.append((version, []))
        try:
            yield self
        finally:
            label, declarations = self._groups.pop()
            self._groups[-1][1].append(VersionGroup(label or "", tuple(declarations)))

    def add(self, declaration: Declaration) -> None:
        """Register a pre-built declaration value."""
        self._declare(declaration)

    # -- Runtime --

    @property
    def declarations(self) -> tuple[Declaration, ...]:
        return tuple(self._groups[0][1])

    @property
    def table(self) -> RouteTable:
        return self.dispatcher.table

    @property
    def dispatcher(self) -> Dispatcher:
        self._ensure_frozen()
        assert self._dispatcher is not None
        return self._dispatcher

    def dispatch(self, method: str, path: Path) -> RouteMatch | NotFound:
        """Resolve a request to its route. See ``Dispatcher.dispatch``."""
        return self.dispatcher.dispatch(method, path)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, dispatcher=self.dispatcher, config=self.config)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Build the route table at startup, before the first request.

        A broken route table fails startup instead of the first request.
        """
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _route(
        self,
        method: str,
        path: Path,
        handler: Any,
        action: str | None,
        when: GuardSource,
    ) -> Any:
        if handler is None:

            def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
                self._declare(RouteDeclaration(method, _freeze_path(path), func, guard=when))
                return func

            return decorator

        self._declare(RouteDeclaration(method, _freeze_path(path), handler, action, when))
        return handler

    def _declare(self, declaration: Declaration) -> None:
        self._check_not_frozen()
        self._groups[-1][1].append(declaration)

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile declarations into the frozen runtime state.

        MUST only be called while holding _freeze_lock. If the build
        raises, the router stays unfrozen and the error propagates.
        """
        if len(self._groups) > 1:
            msg = "Cannot build routes while a version() block is still open."
            raise RuntimeError(msg)
        builder = RouteTableBuilder(self.config)
        builder.extend(self._groups[0][1])
        table = builder.build()
        _check_reserved_bindings(table)
        self._dispatcher = Dispatcher(table, self.config)
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot register routes after the router has been built. "
                "Declare every route before the first dispatch or request."
            )
            raise RuntimeError(msg)


def _freeze_path(path: Path) -> str | tuple[str, ...]:
    return path if isinstance(path, str) else tuple(path)


def _check_reserved_bindings(table: RouteTable) -> None:
    """Endpoints receive the request positionally as ``request``."""
    for route in table:
        if REQUEST_ARG in route.pattern.variables:
            msg = f"variable name {REQUEST_ARG!r} is reserved for the endpoint's request argument"
            raise InvalidPatternError(route.pattern.source, msg)
