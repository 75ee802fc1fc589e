"""Tests for httprouter.routing.route — route entries and dispatch outcomes."""

import pytest

from httprouter.routing.guards import compile_guard
from httprouter.routing.pattern import compile_pattern
from httprouter.routing.route import (
    ANY,
    NotFound,
    OptionsResponse,
    RouteMatch,
    RouteSpec,
    normalize_method,
)


class Pages:
    @staticmethod
    def show() -> str:
        return "show"


def _spec(method: str = "GET", path: str = "/pages/:id", **kwargs: object) -> RouteSpec:
    return RouteSpec(method, compile_pattern(path), **kwargs)  # type: ignore[arg-type]


class TestNormalizeMethod:
    @pytest.mark.parametrize(("raw", "expected"), [("get", "GET"), (" Post ", "POST"), ("*", ANY)])
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_method(raw) == expected


class TestRouteSpec:
    def test_path_renders_pattern(self) -> None:
        assert _spec(path="pages//:id/").path == "/pages/:id"

    def test_accepts_own_method(self) -> None:
        spec = _spec()
        assert spec.accepts("GET")
        assert not spec.accepts("POST")

    def test_any_accepts_everything(self) -> None:
        spec = _spec(ANY)
        assert spec.accepts("GET")
        assert spec.accepts("OPTIONS")
        assert spec.accepts("PROPFIND")

    def test_options_entry_accepts_only_options(self) -> None:
        spec = _spec("OPTIONS", allow="HEAD,GET")
        assert spec.is_options
        assert spec.accepts("OPTIONS")
        assert not spec.accepts("GET")

    def test_describe(self) -> None:
        pattern = compile_pattern("/pages/:id")
        spec = RouteSpec(
            "PUT",
            pattern,
            guard=compile_guard("id == 1", pattern),
            handler=Pages,
            action="show",
            guard_source="id == 1",
        )
        assert spec.describe() == "Pages.show when id == 1"
        assert _spec("OPTIONS", allow="HEAD").describe() == "Allow: HEAD"


class TestRouteMatch:
    def test_truthy_and_endpoint(self) -> None:
        match = RouteMatch(_spec(handler=Pages, action="show"), {"id": "1"})
        assert match
        assert match.endpoint() == "show"
        assert match.handler is Pages
        assert match.action == "show"

    def test_options_endpoint(self) -> None:
        match = RouteMatch(_spec("OPTIONS", allow="HEAD,GET"))
        assert match.endpoint == OptionsResponse("HEAD,GET")
        assert match.endpoint.headers == (("allow", "HEAD,GET"),)


class TestNotFound:
    def test_falsy_404(self) -> None:
        result = NotFound("GET", ("x",))
        assert not result
        assert result.status == 404
