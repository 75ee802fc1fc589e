"""httprouter exception hierarchy.

Build-time problems raise; dispatch-time outcomes never do. A request
that matches nothing yields the ``NotFound`` value from
``httprouter.routing.route``, not an exception.
"""


class RouterError(Exception):
    """Base for all httprouter-specific errors."""


class ConfigurationError(RouterError):
    """Raised when route declarations or router configuration are invalid.

    Typically surfaced while the route table is built at startup.
    """


class InvalidPatternError(ConfigurationError):
    """A path pattern has an empty, malformed, or duplicated variable."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid path pattern {pattern!r}: {reason}")


class InvalidGuardError(ConfigurationError):
    """A guard is malformed or references a variable its path does not bind."""

    def __init__(self, guard: str, reason: str) -> None:
        self.guard = guard
        self.reason = reason
        super().__init__(f"Invalid guard {guard!r}: {reason}")
