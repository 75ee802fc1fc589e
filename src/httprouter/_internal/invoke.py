"""Invoke helpers — call sync or async endpoints uniformly.

Endpoints can be ``def`` or ``async def``. Any code that calls a
user-provided endpoint goes through ``invoke`` so the sync/async check
lives in exactly one place::

    result = await invoke(endpoint, (request,), bindings)

Arguments travel as an explicit tuple and mapping, so path bindings
named ``handler`` or ``in_thread`` reach the endpoint untouched.
"""

import functools
import inspect
from collections.abc import Mapping
from typing import Any

import anyio.to_thread


async def invoke(
    handler: Any,
    args: tuple[Any, ...] = (),
    kwargs: Mapping[str, Any] | None = None,
    /,
    *,
    in_thread: bool = False,
) -> Any:
    """Call ``handler(*args, **kwargs)`` and await the result if it's a coroutine.

    With ``in_thread=True``, plain functions run in an anyio worker
    thread so a blocking endpoint does not stall the event loop.
    """
    call = functools.partial(handler, *args, **(kwargs or {}))
    if in_thread and not inspect.iscoroutinefunction(handler):
        result = await anyio.to_thread.run_sync(call)
    else:
        result = call()
    if inspect.isawaitable(result):
        result = await result
    return result
