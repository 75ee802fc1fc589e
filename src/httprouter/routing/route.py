"""RouteSpec, RouteMatch, and the dispatch outcome values."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from httprouter.routing.guards import TRUE, Guard
from httprouter.routing.pattern import PathPattern

# Wildcard method. Not a valid HTTP token, so no raw() method equals it.
ANY = "*"
OPTIONS = "OPTIONS"


def normalize_method(method: str) -> str:
    """Canonical method token, used at build and dispatch time alike."""
    return method.strip().upper()


@dataclass(frozen=True, slots=True)
class OptionsResponse:
    """Side-effect-free response descriptor for synthesized ``OPTIONS`` routes."""

    allow: str
    status: int = 200
    body: bytes = b""

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return (("allow", self.allow),)


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """One compiled route table entry.

    Handler routes carry ``handler`` and optionally ``action`` (an attribute
    name on the handler). ``OPTIONS`` entries carry ``allow`` instead.
    """

    method: str
    pattern: PathPattern
    guard: Guard = TRUE
    handler: Any = None
    action: str | None = None
    allow: str | None = None
    guard_source: str | None = None

    @property
    def is_options(self) -> bool:
        return self.allow is not None

    @property
    def path(self) -> str:
        return str(self.pattern)

    def accepts(self, method: str) -> bool:
        """Whether this route is a candidate for a (normalized) request method."""
        if self.is_options:
            return method == OPTIONS
        return self.method == ANY or self.method == method

    def describe(self) -> str:
        """Human-readable target, e.g. ``Pages.show`` or ``Allow: HEAD,GET``."""
        if self.is_options:
            return f"Allow: {self.allow}"
        name = getattr(self.handler, "__qualname__", None) or type(self.handler).__qualname__
        target = f"{name}.{self.action}" if self.action else name
        if self.guard_source:
            target = f"{target} when {self.guard_source}"
        return target


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful dispatch: the route and its bindings."""

    route: RouteSpec
    bindings: Mapping[str, str] = field(default_factory=dict)

    @property
    def handler(self) -> Any:
        return self.route.handler

    @property
    def action(self) -> str | None:
        return self.route.action

    @property
    def endpoint(self) -> Any:
        """What the caller should run.

        An ``OptionsResponse`` for ``OPTIONS`` entries; ``handler.<action>``
        when an action is declared; otherwise the handler itself.
        """
        route = self.route
        if route.is_options:
            return OptionsResponse(allow=route.allow or "")
        if route.action is None:
            return route.handler
        return getattr(route.handler, route.action)

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NotFound:
    """Terminal dispatch outcome when no route matches.

    A value, not an exception: callers render it (typically as an empty
    404) however their framework prefers. Falsy, so ``if match:`` reads
    naturally.
    """

    method: str
    path: tuple[str, ...]

    status: int = 404

    def __bool__(self) -> bool:
        return False
