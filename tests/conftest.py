# topmark:header:start
#
#   project      : Harmonizer
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Harmonizer test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides a few typed wrappers around pytest decorators plus
shared engine-output samples.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from harmonizer.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
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
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_harmonizer_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Harmonizer's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("HARMONIZER_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory.

    Config discovery looks at the working directory; this keeps the
    repository's own ``pyproject.toml`` out of the picture.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


# --- Shared engine-output samples ---

KEY_FIELDS_ERROR: dict[str, Any] = {
    "message": "[accounts] On type \"User\", for @key(fields: \"id\"): "
    "Cannot query field \"id\" on type \"User\"",
    "code": "KEY_FIELDS_MISSING_ON_BASE",
}

EXTERNAL_UNUSED_ERROR: dict[str, Any] = {
    "message": "Field \"Product.upc\" is marked @external but is not used",
    "code": "EXTERNAL_UNUSED",
    "nodes": [{"subgraph": "products", "source": "upc: String! @external"}],
}

HINT_INCONSISTENT_FIELD: dict[str, Any] = {
    "message": "Field \"User.name\" is defined in some subgraphs but not all",
    "code": "INCONSISTENT_OBJECT_VALUE_TYPE_FIELD",
}

SUPERGRAPH_SDL: str = "schema @link(url: \"https://specs.apollo.dev/link/v1.0\") { query: Query }"


def engine_ok(sdl: str = SUPERGRAPH_SDL, hints: list[dict[str, Any]] | None = None) -> str:
    """Return a successful composition envelope as JSON text."""
    return json.dumps({"Ok": {"supergraphSdl": sdl, "hints": hints or []}})


def engine_err(*errors: dict[str, Any]) -> str:
    """Return a failed composition envelope as JSON text."""
    return json.dumps({"Err": list(errors)})
