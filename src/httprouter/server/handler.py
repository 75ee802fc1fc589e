"""ASGI handler — runs one HTTP request through the dispatcher.

The only component that touches raw ASGI for requests. Dispatches the
scope's method and path, then either answers directly (not found,
synthesized OPTIONS) or invokes the matched endpoint with the request
and its path bindings.
"""

import logging
from typing import Any

from httprouter._internal.asgi import Receive, Scope, Send
from httprouter._internal.invoke import invoke
from httprouter.config import RouterConfig
from httprouter.http.request import Request, RouteDetails
from httprouter.http.response import Response
from httprouter.routing.dispatcher import Dispatcher
from httprouter.routing.route import NotFound, OptionsResponse, RouteMatch
from httprouter.server.sender import send_response

logger = logging.getLogger("httprouter.server")

NOT_FOUND = Response(status=404)
INTERNAL_ERROR = Response(status=500)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatcher: Dispatcher,
    config: RouterConfig,
) -> None:
    """Process a single HTTP request."""
    if scope["type"] != "http":
        return

    result = dispatcher.dispatch(scope["method"], scope["path"])
    if isinstance(result, NotFound):
        await send_response(NOT_FOUND, send)
        return

    if result.route.is_options:
        options: OptionsResponse = result.endpoint
        response = Response(body=options.body, status=options.status, headers=options.headers)
        await send_response(response, send)
        return

    request = _build_request(scope, receive, result, config)
    try:
        value = await invoke(
            result.endpoint,
            (request,),
            result.bindings,
            in_thread=config.sync_handlers_in_thread,
        )
        response = to_response(value)
    except Exception:
        logger.exception(
            "Unhandled error in %s for %s %s",
            result.route.describe(),
            scope["method"],
            scope["path"],
        )
        response = INTERNAL_ERROR

    await send_response(response, send)


def _build_request(scope: Scope, receive: Receive, match: RouteMatch, config: RouterConfig) -> Request:
    route: RouteDetails | None = None
    if config.add_match_details:
        route = RouteDetails(
            handler=match.handler,
            action=match.action,
            method=match.route.method,
            path=match.route.path,
        )
        state = scope.setdefault("state", {})
        state["httprouter"] = {"handler": match.handler, "action": match.action}
    return Request.from_asgi(scope, receive, path_params=dict(match.bindings), route=route)


def to_response(value: Any) -> Response:
    """Coerce an endpoint's return value into a Response.

    ``Response`` passes through; ``str``/``bytes`` become a 200 body;
    ``None`` becomes an empty 204.
    """
    if isinstance(value, Response):
        return value
    if value is None:
        return Response(status=204)
    if isinstance(value, (str, bytes)):
        return Response(body=value)
    msg = f"Endpoint returned {type(value).__name__!r}; expected Response, str, bytes or None"
    raise TypeError(msg)
