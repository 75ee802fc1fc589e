"""Path pattern compiler.

Turns route paths like ``/users/:user_id`` into a fixed-length sequence
of literal and variable segments. Matching is positional: segment *i*
of a pattern is compared against part *i* of the request path, and the
lengths must agree.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from httprouter.errors import InvalidPatternError


class SegmentKind(Enum):
    LITERAL = "literal"
    VARIABLE = "variable"
    IGNORED = "ignored"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A compiled segment of a route path.

    Literal:  ``users``     (kind=LITERAL, text="users")
    Variable: ``:user_id``  (kind=VARIABLE, text="user_id")
    Ignored:  ``:_user_id`` (kind=IGNORED, text="_user_id")

    Ignored variables match and bind like any other variable, but guards
    may not reference them.
    """

    kind: SegmentKind
    text: str

    @property
    def is_variable(self) -> bool:
        return self.kind is not SegmentKind.LITERAL

    def __str__(self) -> str:
        if self.is_variable:
            return f":{self.text}"
        return self.text


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled, immutable path pattern."""

    source: str
    segments: tuple[PathSegment, ...]

    @property
    def variables(self) -> tuple[str, ...]:
        """Names this pattern binds, in path order."""
        return tuple(seg.text for seg in self.segments if seg.is_variable)

    @property
    def bound_variables(self) -> frozenset[str]:
        """Names a guard may reference (ignored variables excluded)."""
        return frozenset(seg.text for seg in self.segments if seg.kind is SegmentKind.VARIABLE)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return "/" + "/".join(str(seg) for seg in self.segments)

    def match(self, parts: Sequence[str]) -> dict[str, str] | None:
        """Match request path parts, returning bindings or ``None``.

        Never raises: a length mismatch or literal mismatch is a miss.
        """
        if len(parts) != len(self.segments):
            return None
        bindings: dict[str, str] = {}
        for seg, part in zip(self.segments, parts, strict=True):
            if seg.kind is SegmentKind.LITERAL:
                if seg.text != part:
                    return None
            else:
                bindings[seg.text] = part
        return bindings


def split_path(path: str | Sequence[str]) -> tuple[str, ...]:
    """Normalize a path into its non-empty parts.

    The same policy is applied to route paths at build time and to
    request paths at dispatch time, so ``/users/``, ``users`` and
    ``//users`` all normalize to ``("users",)``.
    """
    if isinstance(path, str):
        return tuple(part for part in path.split("/") if part)
    return tuple(part for part in path if part)


def compile_pattern(path: str | Sequence[str]) -> PathPattern:
    """Compile a route path into a ``PathPattern``.

    Examples::

        "/"                -> ()
        "/pages"           -> (Literal "pages",)
        "/pages/:page_id"  -> (Literal "pages", Variable "page_id")
        "/users/:_id"      -> (Literal "users", Ignored "_id")

    Raises ``InvalidPatternError`` for empty, non-identifier, or duplicated
    variable names, and for glob segments (``*rest``), which are not
    supported: patterns never match a variable number of parts.
    """
    source = path if isinstance(path, str) else "/" + "/".join(path)
    segments: list[PathSegment] = []
    seen: set[str] = set()

    for part in split_path(path):
        if part.startswith("*"):
            raise InvalidPatternError(source, f"glob segment {part!r} is not supported")
        if not part.startswith(":"):
            segments.append(PathSegment(SegmentKind.LITERAL, part))
            continue

        name = part[1:]
        if not name:
            raise InvalidPatternError(source, "variable name is empty")
        if not name.isidentifier():
            raise InvalidPatternError(source, f"variable name {name!r} is not an identifier")
        if name in seen:
            raise InvalidPatternError(source, f"variable {name!r} appears more than once")
        seen.add(name)

        kind = SegmentKind.IGNORED if name.startswith("_") else SegmentKind.VARIABLE
        segments.append(PathSegment(kind, name))

    return PathPattern(source=source, segments=tuple(segments))


def ignore_args(path: str) -> str:
    """Rename every variable in *path* so that it binds as ignored.

    ``"/v1/:tenant/users/:id"`` becomes ``"/v1/:_tenant/users/:_id"``.
    Positions and match behavior are unchanged; only the names move into
    the ignored namespace, so they cannot be used by guards. Names that
    are already ignored are left alone.
    """
    parts = path.split("/")
    renamed = [
        f":_{part[1:]}" if part.startswith(":") and not part.startswith(":_") else part
        for part in parts
    ]
    return "/".join(renamed)
