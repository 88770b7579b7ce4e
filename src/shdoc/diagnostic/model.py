# topmark:header:start
#
#   project      : shdoc
#   file         : model.py
#   file_relpath : src/shdoc/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for shdoc.

This module defines the diagnostic primitives used by the parser to report
fatal documentation errors and advisory messages.

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable structured diagnostic payload (level + message + location).
    * DiagnosticLog: ordered collection of fatal errors and advisories.
    * format_diagnostic: the human-readable three-line rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from shdoc.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from shdoc.document.model import SourceLocation


logger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during parsing.

    ``ERROR`` is fatal (suppresses rendered output) and ``WARNING`` is advisory.
    """

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, message and optional source location."""

    level: DiagnosticLevel
    message: str
    location: SourceLocation | None = None


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics, kept in insertion order."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic to the log.

        Args:
            diagnostic: The diagnostic object.
        """
        self.items.append(diagnostic)
        logger.debug("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str, location: SourceLocation | None = None) -> Diagnostic:
        """Add a ``warning`` diagnostic and return it."""
        diagnostic = Diagnostic(DiagnosticLevel.WARNING, message, location)
        self.add(diagnostic)
        return diagnostic

    def add_error(self, message: str, location: SourceLocation | None = None) -> Diagnostic:
        """Add an ``error`` diagnostic and return it."""
        diagnostic = Diagnostic(DiagnosticLevel.ERROR, message, location)
        self.add(diagnostic)
        return diagnostic

    def errors(self) -> list[Diagnostic]:
        """Return the ``error`` diagnostics in insertion order."""
        return [d for d in self.items if d.level == DiagnosticLevel.ERROR]

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics in insertion order."""
        return iter(self.items)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as a severity-tagged summary plus an indented context block.

    Example:
        ```text
        [ERROR] @section requires a title
            line: 3
            file: lib/util.sh
        ```

    Args:
        diagnostic: The diagnostic to render.

    Returns:
        The rendered text without a trailing newline.
    """
    lines: list[str] = [f"[{diagnostic.level.value.upper()}] {diagnostic.message}"]
    if diagnostic.location is not None:
        lines.append(f"    line: {diagnostic.location.line}")
        lines.append(f"    file: {diagnostic.location.file}")
    return "\n".join(lines)
