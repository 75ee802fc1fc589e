"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(log_dispatch=True, sync_handlers_in_thread=True)
    """

    # Route table
    index_by_method: bool = True  # Pre-group candidates per method; order is unchanged
    validate_actions: bool = True  # Fail the build when handler.<action> is missing

    # Dispatch
    log_dispatch: bool = False  # Debug-log every dispatch outcome on "httprouter.routing"

    # ASGI adapter
    add_match_details: bool = True  # Expose handler/action on request.route and scope["state"]
    sync_handlers_in_thread: bool = False  # Run plain ``def`` endpoints in an anyio worker thread
