"""Route table construction.

Declarations are accumulated by an explicit builder during setup and
consumed exactly once to produce an immutable ``RouteTable``::

    builder = RouteTableBuilder()
    builder.add(RouteDeclaration("GET", "/pages/:page_id", Pages, "show"))
    builder.add(ResourceDeclaration("users", Users))
    table = builder.build()

The build is atomic. Every declaration is compiled; if any of them is
invalid, the first error is raised (with the others attached as notes)
and no table is produced.
"""

import logging
from collections.abc import Iterable, Iterator

from httprouter.config import RouterConfig
from httprouter.errors import ConfigurationError
from httprouter.routing.declarations import (
    Declaration,
    OptionsDeclaration,
    ResourceDeclaration,
    RouteDeclaration,
)
from httprouter.routing.guards import compile_guard
from httprouter.routing.pattern import compile_pattern
from httprouter.routing.resource import expand_resource
from httprouter.routing.route import ANY, OPTIONS, RouteSpec, normalize_method
from httprouter.routing.version import flatten

logger = logging.getLogger("httprouter.routing")


class RouteTable:
    """An ordered, immutable collection of compiled routes.

    Declaration order is match priority. The optional method index maps
    each method to its candidate routes (that method's routes plus every
    ``ANY`` route) with the original relative order preserved.
    """

    __slots__ = ("_any", "_by_method", "_routes")

    def __init__(self, routes: Iterable[RouteSpec] = (), *, index_by_method: bool = True) -> None:
        self._routes: tuple[RouteSpec, ...] = tuple(routes)
        self._any: tuple[RouteSpec, ...] = tuple(r for r in self._routes if r.method == ANY)
        self._by_method: dict[str, tuple[RouteSpec, ...]] | None = None
        if index_by_method:
            methods = {r.method for r in self._routes if r.method != ANY}
            self._by_method = {
                method: tuple(r for r in self._routes if r.accepts(method)) for method in methods
            }

    @property
    def routes(self) -> tuple[RouteSpec, ...]:
        return self._routes

    def candidates(self, method: str) -> tuple[RouteSpec, ...]:
        """Routes that may accept *method* (already normalized), in table order."""
        if self._by_method is None:
            return self._routes
        return self._by_method.get(method, self._any)

    def __iter__(self) -> Iterator[RouteSpec]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __getitem__(self, index: int) -> RouteSpec:
        return self._routes[index]

    def __repr__(self) -> str:
        return f"RouteTable({len(self._routes)} routes)"


def compile_declaration(
    decl: RouteDeclaration | OptionsDeclaration,
    *,
    validate_actions: bool = True,
) -> RouteSpec:
    """Compile one flat declaration into a ``RouteSpec``."""
    pattern = compile_pattern(decl.path)

    if isinstance(decl, OptionsDeclaration):
        return RouteSpec(method=OPTIONS, pattern=pattern, allow=decl.allow)

    method = ANY if decl.method == ANY else normalize_method(decl.method)
    if not method:
        msg = f"Route {pattern.source!r}: method must not be empty"
        raise ConfigurationError(msg)

    guard = compile_guard(decl.guard, pattern)
    if validate_actions and decl.action is not None:
        target = getattr(decl.handler, decl.action, None)
        if not callable(target):
            handler_name = getattr(decl.handler, "__qualname__", repr(decl.handler))
            msg = f"Route {method} {pattern.source!r}: {handler_name} has no callable action {decl.action!r}"
            raise ConfigurationError(msg)
    elif decl.action is None and not callable(decl.handler):
        msg = f"Route {method} {pattern.source!r}: handler {decl.handler!r} is not callable and no action was given"
        raise ConfigurationError(msg)

    return RouteSpec(
        method=method,
        pattern=pattern,
        guard=guard,
        handler=decl.handler,
        action=decl.action,
        guard_source=decl.guard if isinstance(decl.guard, str) else None,
    )


def build_table(
    declarations: Iterable[Declaration],
    *,
    config: RouterConfig | None = None,
) -> RouteTable:
    """Compile declarations into a ``RouteTable``.

    Raises the first ``ConfigurationError`` (``InvalidPatternError``,
    ``InvalidGuardError``, ...) encountered. Every other failure is
    attached to it via ``add_note`` so one startup shows all mistakes.
    """
    config = config or RouterConfig()
    routes: list[RouteSpec] = []
    errors: list[ConfigurationError] = []

    for decl in flatten(declarations):
        try:
            flat = expand_resource(decl) if isinstance(decl, ResourceDeclaration) else [decl]
        except ConfigurationError as exc:
            errors.append(exc)
            continue
        for item in flat:
            try:
                routes.append(compile_declaration(item, validate_actions=config.validate_actions))
            except ConfigurationError as exc:
                errors.append(exc)

    if errors:
        first = errors[0]
        for other in errors[1:]:
            first.add_note(f"also: {other}")
        logger.error("Route table build failed with %d error(s)", len(errors))
        raise first

    table = RouteTable(routes, index_by_method=config.index_by_method)
    logger.debug("Compiled route table with %d routes", len(table))
    return table


class RouteTableBuilder:
    """Accumulates declarations during setup; builds the table exactly once."""

    __slots__ = ("_built", "_config", "_declarations")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._declarations: list[Declaration] = []
        self._built = False

    @property
    def declarations(self) -> tuple[Declaration, ...]:
        return tuple(self._declarations)

    def add(self, declaration: Declaration) -> None:
        """Append a declaration. Must be called before build()."""
        self._check_not_built()
        self._declarations.append(declaration)

    def extend(self, declarations: Iterable[Declaration]) -> None:
        self._check_not_built()
        self._declarations.extend(declarations)

    def build(self) -> RouteTable:
        """Consume the builder and return the compiled table.

        A failed build leaves the builder open so the caller may inspect
        its declarations; a successful one closes it.
        """
        self._check_not_built()
        table = build_table(self._declarations, config=self._config)
        self._built = True
        return table

    def _check_not_built(self) -> None:
        if self._built:
            msg = "Route table has already been built; the builder cannot be reused."
            raise RuntimeError(msg)
