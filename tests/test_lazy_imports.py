"""Tests for httprouter.__init__ — lazy import registry covers all public names."""


import pytest

import httprouter


@pytest.mark.parametrize("name", httprouter.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(httprouter, name)
    assert obj is not None, f"httprouter.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    """Every name in __all__ has a corresponding entry in _LAZY_IMPORTS."""
    missing = set(httprouter.__all__) - set(httprouter._LAZY_IMPORTS)
    assert not missing, f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}"


def test_lazy_registry_no_extras() -> None:
    extras = set(httprouter._LAZY_IMPORTS) - set(httprouter.__all__)
    assert not extras, f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        httprouter.__getattr__("ThisDoesNotExist")


def test_any_sentinel() -> None:
    assert httprouter.ANY == "*"
