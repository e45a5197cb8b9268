# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Pytest configuration for the CanonRepr test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
the logging configuration for test runs.

Notes:
    Expected renderings in the tests use the constant ``PTR`` token for
    identities (see `render_ptr`), so they do not depend on object addresses.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from canonrepr.config import logging
from canonrepr.rendering.addresses import constant_address
from canonrepr.rendering.api import render

if TYPE_CHECKING:
    from canonrepr.introspection.base import Introspector

F = TypeVar("F", bound=Callable[..., object])

# Type of a decorator that returns the callable it wraps.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


def render_ptr(value: Any, *, introspector: Introspector | None = None) -> str:
    """Render ``value`` with every identity token shown as ``PTR``."""
    return render(value, address_formatter=constant_address(), introspector=introspector)


def assert_renders_like(value: Any, expected: str) -> None:
    """Assert that ``value`` renders (with ``PTR`` tokens) exactly as ``expected``."""
    actual: str = render_ptr(value)
    assert actual == expected, f"\nExpected: {expected}\nActual  : {actual}"


@pytest.fixture(autouse=True)
def silence_canonrepr_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.ENV_LOG_LEVEL, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so cycle and placeholder logging is exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
