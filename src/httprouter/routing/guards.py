"""Route guards — a small predicate language over captured path variables.

A guard gates an otherwise-matching route::

    router.put("/pages/:page_id", Pages, "update_first", when="page_id == 1")

Guards are parsed once, when the route table is built, into an immutable
expression tree. Evaluation reads only the bindings of the current
request and never raises.

Supported syntax: variable names, integer and string literals, ``==``,
``!=``, ``and``, ``or``, ``not`` and parentheses. Everything else is
rejected with ``InvalidGuardError``.
"""

import ast
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from httprouter.errors import InvalidGuardError
from httprouter.routing.pattern import PathPattern


class Guard(ABC):
    """Base class for guard expression nodes.

    Subclasses must implement ``value``; an incomplete node cannot be
    instantiated, so every compiled guard evaluates without raising.
    """

    __slots__ = ()

    def evaluate(self, bindings: Mapping[str, str]) -> bool:
        return bool(self.value(bindings))

    @abstractmethod
    def value(self, bindings: Mapping[str, str]) -> object: ...

    def variables(self) -> Iterator[str]:
        """Yield every variable name referenced by this expression."""
        yield from ()


@dataclass(frozen=True, slots=True)
class Const(Guard):
    """A literal. Compared by text, so ``Const(1)`` equals path text ``"1"``."""

    literal: str | int | bool

    def value(self, bindings: Mapping[str, str]) -> object:
        return self.literal


@dataclass(frozen=True, slots=True)
class Var(Guard):
    """A reference to a captured path variable."""

    name: str

    def value(self, bindings: Mapping[str, str]) -> object:
        return bindings.get(self.name)

    def variables(self) -> Iterator[str]:
        yield self.name


@dataclass(frozen=True, slots=True)
class Equals(Guard):
    left: Guard
    right: Guard

    def value(self, bindings: Mapping[str, str]) -> object:
        return _as_text(self.left.value(bindings)) == _as_text(self.right.value(bindings))

    def variables(self) -> Iterator[str]:
        yield from self.left.variables()
        yield from self.right.variables()


@dataclass(frozen=True, slots=True)
class Not(Guard):
    operand: Guard

    def value(self, bindings: Mapping[str, str]) -> object:
        return not self.operand.evaluate(bindings)

    def variables(self) -> Iterator[str]:
        yield from self.operand.variables()


@dataclass(frozen=True, slots=True)
class And(Guard):
    operands: tuple[Guard, ...]

    def value(self, bindings: Mapping[str, str]) -> object:
        return all(op.evaluate(bindings) for op in self.operands)

    def variables(self) -> Iterator[str]:
        for op in self.operands:
            yield from op.variables()


@dataclass(frozen=True, slots=True)
class Or(Guard):
    operands: tuple[Guard, ...]

    def value(self, bindings: Mapping[str, str]) -> object:
        return any(op.evaluate(bindings) for op in self.operands)

    def variables(self) -> Iterator[str]:
        for op in self.operands:
            yield from op.variables()


TRUE = Const(True)


def _as_text(value: object) -> object:
    # bool before int: True is an int, but "true" is how it would appear in a path
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return value


def parse_guard(source: str) -> Guard:
    """Parse guard source text into an expression tree.

    Raises ``InvalidGuardError`` on syntax errors and on any construct
    outside the supported subset (calls, attribute access, arithmetic, ...).
    """
    try:
        tree = ast.parse(source.strip(), mode="eval")
    except SyntaxError as exc:
        raise InvalidGuardError(source, f"syntax error: {exc.msg}") from exc
    return _convert(tree.body, source)


def _convert(node: ast.expr, source: str) -> Guard:
    match node:
        case ast.Name(id=name):
            return Var(name)
        case ast.Constant(value=bool() | int() | str() as literal):
            return Const(literal)
        case ast.UnaryOp(op=ast.Not(), operand=operand):
            return Not(_convert(operand, source))
        case ast.BoolOp(op=ast.And(), values=values):
            return And(tuple(_convert(v, source) for v in values))
        case ast.BoolOp(op=ast.Or(), values=values):
            return Or(tuple(_convert(v, source) for v in values))
        case ast.Compare(left=left, ops=[op], comparators=[right]):
            equals = Equals(_convert(left, source), _convert(right, source))
            if isinstance(op, ast.Eq):
                return equals
            if isinstance(op, ast.NotEq):
                return Not(equals)
            msg = f"unsupported comparison {type(op).__name__!r}; use == or !="
            raise InvalidGuardError(source, msg)
        case ast.Compare():
            raise InvalidGuardError(source, "chained comparisons are not supported")
    raise InvalidGuardError(source, f"unsupported expression {ast.unparse(node)!r}")


def compile_guard(guard: str | Guard | None, pattern: PathPattern) -> Guard:
    """Resolve a declared guard against the pattern it gates.

    ``None`` becomes ``TRUE``. Every referenced name must be a bound,
    non-ignored variable of *pattern*; anything else is a build-time
    ``InvalidGuardError`` rather than a dispatch-time surprise.
    """
    if guard is None:
        return TRUE
    tree = parse_guard(guard) if isinstance(guard, str) else guard
    if not isinstance(tree, Guard):
        raise InvalidGuardError(repr(guard), "guard must be a string or a Guard expression")

    available = pattern.bound_variables
    for name in tree.variables():
        if name not in available:
            label = guard if isinstance(guard, str) else repr(guard)
            bound = ", ".join(sorted(available)) or "none"
            msg = f"references {name!r}, which {pattern.source!r} does not bind (bound: {bound})"
            raise InvalidGuardError(label, msg)
    return tree
