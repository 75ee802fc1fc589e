"""RESTful resource expansion.

``resource users, Users`` expands to::

    GET     /users           Users.index
    POST    /users           Users.create
    GET     /users/:id       Users.show
    PUT     /users/:id       Users.update
    PATCH   /users/:id       Users.patch
    DELETE  /users/:id       Users.delete

    OPTIONS /users           "HEAD,GET,POST"
    OPTIONS /users/:_id      "HEAD,GET,PUT,PATCH,DELETE"

``only`` filters both the CRUD routes and the methods listed in the two
Allow strings. The OPTIONS member path binds its argument as an ignored
variable so it never shadows the argument name used by the CRUD routes.
"""

from collections.abc import Iterable

from httprouter.errors import ConfigurationError
from httprouter.routing.declarations import (
    ACTIONS,
    OptionsDeclaration,
    ResourceDeclaration,
    RouteDeclaration,
    join_path,
)
from httprouter.routing.pattern import ignore_args
from httprouter.routing.route import normalize_method

# action -> (method, member route?)
_CANONICAL: dict[str, tuple[str, bool]] = {
    "index": ("GET", False),
    "create": ("POST", False),
    "show": ("GET", True),
    "update": ("PUT", True),
    "patch": ("PATCH", True),
    "delete": ("DELETE", True),
}


def allow_header(methods: Iterable[str]) -> str:
    """Render an Allow string: ``HEAD`` first, then the methods in order."""
    return ",".join(["HEAD", *(normalize_method(m) for m in methods)])


def expand_resource(
    decl: ResourceDeclaration,
) -> list[RouteDeclaration | OptionsDeclaration]:
    """Expand a resource into its CRUD routes followed by its two OPTIONS routes.

    Raises ``ConfigurationError`` if ``only`` names an unknown action or
    the resource name or argument is empty.
    """
    unknown = [action for action in decl.only if action not in _CANONICAL]
    if unknown:
        msg = (
            f"Resource {decl.name!r}: unknown action(s) {', '.join(map(repr, unknown))}. "
            f"Valid actions: {', '.join(ACTIONS)}"
        )
        raise ConfigurationError(msg)
    name = decl.name.strip("/")
    if not name:
        msg = "Resource name must not be empty"
        raise ConfigurationError(msg)
    if not decl.arg:
        msg = f"Resource {name!r}: argument name must not be empty"
        raise ConfigurationError(msg)

    prefix = (decl.prepend_path or "").strip("/")
    collection = join_path(prefix, name)
    member = f"{collection}/:{decl.arg}"

    allowed = [action for action in ACTIONS if action in decl.only]
    routes: list[RouteDeclaration | OptionsDeclaration] = [
        RouteDeclaration(
            method=_CANONICAL[action][0],
            path=member if _CANONICAL[action][1] else collection,
            handler=decl.handler,
            action=action,
        )
        for action in allowed
    ]

    options_collection = join_path(ignore_args(prefix), name)
    options_member = f"{options_collection}/:_{decl.arg}"
    collection_methods = [_CANONICAL[a][0] for a in allowed if not _CANONICAL[a][1]]
    member_methods = [_CANONICAL[a][0] for a in allowed if _CANONICAL[a][1]]
    routes.append(OptionsDeclaration(options_collection, allow_header(collection_methods)))
    routes.append(OptionsDeclaration(options_member, allow_header(member_methods)))
    return routes
