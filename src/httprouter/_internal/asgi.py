"""ASGI plumbing shared by the request adapter, the sender, and TestClient."""

from collections.abc import Awaitable, Callable, Iterable, MutableMapping
from typing import Any, TypeAlias

Message: TypeAlias = MutableMapping[str, Any]
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]

RawHeaders: TypeAlias = list[tuple[bytes, bytes]]


def encode_headers(pairs: Iterable[tuple[str, str]]) -> RawHeaders:
    """Encode ``(name, value)`` pairs for ASGI. Names are lower-cased."""
    return [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in pairs]


def decode_headers(raw: Iterable[tuple[bytes, bytes]]) -> list[tuple[str, str]]:
    return [(name.decode("latin-1"), value.decode("latin-1")) for name, value in raw]
