"""Version groups — namespace a batch of declarations under a path prefix.

::

    rewrite("2", [RouteDeclaration("GET", "/pages", Pages, "index")])
    # -> (RouteDeclaration("GET", "/2/pages", Pages, "index"),)

Resources are not rewritten path-by-path; their ``prepend_path`` is set
(or chained as ``"<version>/<existing>"``) so the expander can derive both
the CRUD paths and the OPTIONS paths from it.
"""

from collections.abc import Iterable
from dataclasses import replace

from httprouter.routing.declarations import (
    Declaration,
    OptionsDeclaration,
    ResourceDeclaration,
    RouteDeclaration,
    VersionGroup,
    join_path,
)


def rewrite(version: str, declarations: Iterable[Declaration]) -> tuple[Declaration, ...]:
    """Prefix every declaration with *version*, preserving order.

    Nested groups are flattened inside-out, so ``version("1")`` around
    ``version("beta")`` yields paths under ``/1/beta``.
    """
    prefix = version.strip("/")
    result: list[Declaration] = []
    for decl in declarations:
        match decl:
            case VersionGroup():
                result.extend(rewrite(prefix, rewrite(decl.version, decl.declarations)))
            case ResourceDeclaration(prepend_path=None):
                result.append(replace(decl, prepend_path=prefix))
            case ResourceDeclaration(prepend_path=inner):
                result.append(replace(decl, prepend_path=f"{prefix}/{inner.strip('/')}"))
            case RouteDeclaration() | OptionsDeclaration():
                result.append(replace(decl, path=join_path(prefix, decl.path)))
            case _:
                msg = f"Cannot version {type(decl).__name__!r}; expected a route declaration"
                raise TypeError(msg)
    return tuple(result)


def flatten(declarations: Iterable[Declaration]) -> tuple[Declaration, ...]:
    """Resolve every top-level ``VersionGroup``; other declarations pass through."""
    result: list[Declaration] = []
    for decl in declarations:
        if isinstance(decl, VersionGroup):
            result.extend(rewrite(decl.version, decl.declarations))
        else:
            result.append(decl)
    return tuple(result)
