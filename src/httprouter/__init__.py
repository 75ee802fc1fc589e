"""httprouter — a declarative HTTP route compiler and dispatcher.

Routes are declared once, compiled into an ordered, immutable table,
and resolved per request to the first route whose method, path, and
guard match.

Basic usage::

    from httprouter import HttpRouter

    router = HttpRouter()

    with router.version("1"):
        router.get("/pages/:page_id", Pages, "show")
        router.resource("users", Users, arg="user_id")

    match = router.dispatch("GET", "/1/pages/42")
    if match:
        match.endpoint(request, **match.bindings)

``HttpRouter`` is also an ASGI application.
"""

__version__ = "0.1.0"
__all__ = [
    "ANY",
    "ConfigurationError",
    "Dispatcher",
    "HttpRouter",
    "InvalidGuardError",
    "InvalidPatternError",
    "NotFound",
    "Request",
    "Response",
    "RouteMatch",
    "RouteSpec",
    "RouteTable",
    "RouteTableBuilder",
    "RouterConfig",
    "RouterError",
]

_LAZY_IMPORTS: dict[str, str] = {
    "ANY": "httprouter.routing.route",
    "ConfigurationError": "httprouter.errors",
    "Dispatcher": "httprouter.routing.dispatcher",
    "HttpRouter": "httprouter.router",
    "InvalidGuardError": "httprouter.errors",
    "InvalidPatternError": "httprouter.errors",
    "NotFound": "httprouter.routing.route",
    "Request": "httprouter.http.request",
    "Response": "httprouter.http.response",
    "RouteMatch": "httprouter.routing.route",
    "RouteSpec": "httprouter.routing.route",
    "RouteTable": "httprouter.routing.table",
    "RouteTableBuilder": "httprouter.routing.table",
    "RouterConfig": "httprouter.config",
    "RouterError": "httprouter.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import httprouter`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
