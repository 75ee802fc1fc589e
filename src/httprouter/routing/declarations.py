"""Route declarations — the uncompiled input to the route table build.

Declarations are plain frozen values. Version groups and resources are
rewritten and expanded into ``RouteDeclaration`` / ``OptionsDeclaration``
before anything is compiled, so the whole pipeline stays a pure,
order-preserving transformation over a list.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from httprouter.routing.guards import Guard

# Canonical action order; also the order methods appear in Allow strings.
ACTIONS: tuple[str, ...] = ("index", "create", "show", "update", "patch", "delete")


@dataclass(frozen=True, slots=True)
class RouteDeclaration:
    """``method path [when guard], handler[, action]``.

    Covers the verb helpers, ``any`` (method ``"*"``) and ``raw`` custom
    methods alike; the method token is normalized at compile time.
    """

    method: str
    path: str | tuple[str, ...]
    handler: Any
    action: str | None = None
    guard: str | Guard | None = None


@dataclass(frozen=True, slots=True)
class OptionsDeclaration:
    """``options path, allow`` — answers OPTIONS with a fixed Allow header."""

    path: str | tuple[str, ...]
    allow: str


@dataclass(frozen=True, slots=True)
class ResourceDeclaration:
    """``resource name, handler`` — expands to CRUD routes plus OPTIONS.

    ``prepend_path`` is mainly set by version groups.
    """

    name: str
    handler: Any
    arg: str = "id"
    only: tuple[str, ...] = ACTIONS
    prepend_path: str | None = None


@dataclass(frozen=True, slots=True)
class VersionGroup:
    """A batch of declarations sharing a version path prefix."""

    version: str
    declarations: tuple["Declaration", ...] = ()


Declaration: TypeAlias = RouteDeclaration | OptionsDeclaration | ResourceDeclaration | VersionGroup


def join_path(prefix: str, path: str | Sequence[str]) -> str:
    """Join a prefix and a path with exactly one ``/`` between them."""
    tail = path if isinstance(path, str) else "/".join(path)
    return "/" + "/".join(p for p in (prefix.strip("/"), tail.strip("/")) if p)
