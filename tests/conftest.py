# topmark:header:start
#
#   project      : shdoc
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the shdoc test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
small helpers to parse annotated snippets in a single call.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from shdoc.config import logging
from shdoc.parser import ParserContext

if TYPE_CHECKING:
    from shdoc.diagnostic.model import Diagnostic

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.parser`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_parser: DecoratorType[Any] = as_typed_mark(pytest.mark.parser)
mark_rendering: DecoratorType[Any] = as_typed_mark(pytest.mark.rendering)
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
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_shdoc_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure shdoc's log level is not forced via env during tests.

    This avoids accidental DEBUG noise when the developer has exported
    SHDOC_LOG_LEVEL (or a color override) in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("SHDOC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging for the test suite (DEBUG tier, plain formatting).

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.LogTier.DEBUG, color=False)


def snippet(text: str) -> str:
    """Dedent a triple-quoted source snippet and drop its leading newline."""
    return textwrap.dedent(text).lstrip("\n")


def parse_snippet(
    text: str,
    *,
    file: str = "test.sh",
) -> tuple[ParserContext, list[Diagnostic]]:
    """Parse a dedented snippet with a collecting advisory sink.

    Args:
        text (str): Annotated source; dedented with `snippet`.
        file (str): File identifier used in source locations.

    Returns:
        tuple[ParserContext, list[Diagnostic]]: The parser context (not yet
            finished) and the advisories delivered to the sink, in order.
    """
    advisories: list[Diagnostic] = []
    ctx = ParserContext(advisory_sink=advisories.append)
    ctx.parse_text(snippet(text), file=file)
    return ctx, advisories
