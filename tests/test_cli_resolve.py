"""Tests for httprouter.cli._resolve — router import resolution."""

import types

import pytest

from httprouter.cli._resolve import load_router, resolve_router
from httprouter.router import HttpRouter


def _factory() -> HttpRouter:
    router = HttpRouter()
    router.get("/", lambda request: "ok")
    return router


def _bad_factory() -> HttpRouter:
    msg = "boom"
    raise RuntimeError(msg)


@pytest.fixture
def _fake_router_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with routers on sys.modules."""
    mod = types.ModuleType("_fake_httprouter_app")
    mod.router = HttpRouter()  # type: ignore[attr-defined]
    mod.custom = HttpRouter()  # type: ignore[attr-defined]
    mod.create_router = _factory  # type: ignore[attr-defined]
    mod.bad_factory = _bad_factory  # type: ignore[attr-defined]
    mod.not_a_router = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_httprouter_app", mod)


@pytest.mark.usefixtures("_fake_router_module")
class TestResolveRouter:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_router("_fake_httprouter_app:router"), HttpRouter)

    def test_custom_attribute(self) -> None:
        import sys

        assert resolve_router("_fake_httprouter_app:custom") is sys.modules["_fake_httprouter_app"].custom

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'router'."""
        assert isinstance(resolve_router("_fake_httprouter_app"), HttpRouter)

    def test_factory_is_called(self) -> None:
        router = resolve_router("_fake_httprouter_app:create_router")
        assert len(router.table) == 1

    def test_factory_error_wrapped(self) -> None:
        with pytest.raises(TypeError, match="raised an error: boom"):
            resolve_router("_fake_httprouter_app:bad_factory")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_router("_nonexistent_module_xyz:router")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_router("_fake_httprouter_app:nonexistent")

    def test_not_a_router(self) -> None:
        with pytest.raises(TypeError, match="not an HttpRouter"):
            resolve_router("_fake_httprouter_app:not_a_router")


@pytest.mark.usefixtures("_fake_router_module")
class TestLoadRouter:
    def test_builds_table(self) -> None:
        router = load_router("_fake_httprouter_app:create_router")
        assert router.table.routes[0].path == "/"

    def test_errors_exit_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            load_router("_fake_httprouter_app:not_a_router")
        assert exc_info.value.code == 1
        assert "not an HttpRouter" in capsys.readouterr().err
