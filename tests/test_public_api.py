"""Public surface checks for the top-level package."""

from __future__ import annotations

import logging

import pytest

import trycatch

pytestmark = pytest.mark.unit


def test_public_names_are_exported() -> None:
    for name in trycatch.__all__:
        assert hasattr(trycatch, name), name


def test_converter_is_reachable_from_package() -> None:
    assert trycatch.try_catch(lambda: "ok") == trycatch.Success("ok")


def test_version_is_a_string() -> None:
    assert isinstance(trycatch.__version__, str)
    assert trycatch.__version__


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("trycatch").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


@pytest.mark.parametrize(
    "func", [trycatch.try_catch_async, trycatch.try_catch_sync], ids=lambda f: f.__name__
)
def test_converter_generics_only_bind_the_value_type(func) -> None:
    """The error type is not solvable from the argument, so only T is generic."""
    assert [p.__name__ for p in func.__type_params__] == ["T"]
