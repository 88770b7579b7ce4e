# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/parser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Annotation parsing engine.

The engine is split into a pure line classifier (`shdoc.parser.classifier`), a
description buffer, a block accumulator, an error controller, and the
`ParserContext` that owns all of them for one run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shdoc.parser.context import DEFAULT_FILE_NAME, ParserContext, ParseResult

if TYPE_CHECKING:
    from shdoc.parser.errors import AdvisorySink

__all__ = [
    "ParseResult",
    "ParserContext",
    "parse_text",
]


def parse_text(
    text: str,
    *,
    file: str = DEFAULT_FILE_NAME,
    advisory_sink: AdvisorySink | None = None,
) -> ParseResult:
    """Parse a single in-memory source and return the outcome.

    Args:
        text: Source text.
        file: File identifier used in locations and diagnostics.
        advisory_sink: Receives advisory diagnostics as they occur; defaults to logging.

    Returns:
        The parse result; ``result.model`` is None when a fatal error was recorded.
    """
    ctx = ParserContext(advisory_sink=advisory_sink)
    ctx.parse_text(text, file=file)
    return ctx.finish()
