"""Request-time dispatch over a frozen route table.

Stateless between requests: each call is a linear scan of the candidate
routes for the request method, terminating in exactly one of a
``RouteMatch`` or ``NotFound``. Dispatch performs only in-memory
comparisons, so a single ``Dispatcher`` is shared freely across threads
and tasks.
"""

import logging
from collections.abc import Sequence

from httprouter.config import RouterConfig
from httprouter.routing.pattern import split_path
from httprouter.routing.route import NotFound, RouteMatch, normalize_method
from httprouter.routing.table import RouteTable

logger = logging.getLogger("httprouter.routing")


class Dispatcher:
    """Resolve ``(method, path)`` to the first matching route.

    Usage::

        dispatcher = Dispatcher(table)
        result = dispatcher.dispatch("GET", "/pages/42")
        if result:
            result.endpoint(request, **result.bindings)
    """

    __slots__ = ("_log", "table")

    def __init__(self, table: RouteTable, config: RouterConfig | None = None) -> None:
        self.table = table
        self._log = (config or RouterConfig()).log_dispatch

    def dispatch(self, method: str, path: str | Sequence[str]) -> RouteMatch | NotFound:
        """Return the first route whose method, path, and guard all match.

        Routes are tried in declaration order; later routes that would
        match the same request are unreachable. Never raises.
        """
        method = normalize_method(method)
        parts = split_path(path)

        for route in self.table.candidates(method):
            if not route.accepts(method):
                continue
            bindings = route.pattern.match(parts)
            if bindings is None:
                continue
            if not route.guard.evaluate(bindings):
                continue
            if self._log:
                logger.debug("%s /%s -> %s %s", method, "/".join(parts), route.method, route.path)
            return RouteMatch(route=route, bindings=bindings)

        if self._log:
            logger.debug("%s /%s -> not found", method, "/".join(parts))
        return NotFound(method=method, path=parts)
