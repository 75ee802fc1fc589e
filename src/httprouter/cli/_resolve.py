"""Router import resolution — resolves ``"module:attribute"`` strings.

Shared by ``httprouter routes`` and ``httprouter match``.
"""

import importlib
import sys

from httprouter.errors import ConfigurationError
from httprouter.router import HttpRouter


def resolve_router(import_string: str) -> HttpRouter:
    """Resolve an import string to an ``HttpRouter`` instance.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"router"``. A callable that is not a router is treated
    as a factory and called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an ``HttpRouter``.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, HttpRouter):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, HttpRouter):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not an HttpRouter instance"
        raise TypeError(msg)

    return obj


def load_router(import_string: str) -> HttpRouter:
    """Resolve and build a router, exiting with status 1 on failure."""
    try:
        router = resolve_router(import_string)
        router._ensure_frozen()
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return router
