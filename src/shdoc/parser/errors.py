# topmark:header:start
#
#   project      : shdoc
#   file         : errors.py
#   file_relpath : src/shdoc/parser/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error controller: fatal errors, advisory messages and panic mode.

Two severities are handled:

* **fatal** errors are recorded with their source location and switch panic mode
  on. Any fatal error suppresses the rendered output at the end of the run, but
  parsing continues so every fatal error of the run is reported together.
* **advisory** messages are handed to the advisory sink immediately and never
  affect control flow.

Panic mode is an explicit flag checked before each line is classified. While it is
set, lines are discarded until one carries a tag from the resynchronization set
(see [`is_resync_line`][shdoc.parser.classifier.is_resync_line]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shdoc.config.logging import get_logger
from shdoc.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    format_diagnostic,
)
from shdoc.parser.classifier import is_resync_line

if TYPE_CHECKING:
    from collections.abc import Callable

    from shdoc.document.model import SourceLocation

    AdvisorySink = Callable[[Diagnostic], None]

logger = get_logger(__name__)


def log_advisory(diagnostic: Diagnostic) -> None:
    """Default advisory sink: emit the formatted diagnostic through logging."""
    logger.warning("%s", format_diagnostic(diagnostic))


class ErrorController:
    """Records diagnostics and drives panic-mode skipping.

    Attributes:
        diagnostics: Every fatal and advisory diagnostic, in order of occurrence.
        panic: True while lines are being discarded after a fatal error.
    """

    diagnostics: DiagnosticLog
    panic: bool

    def __init__(self, advisory_sink: AdvisorySink | None = None) -> None:
        self.diagnostics = DiagnosticLog()
        self.panic = False
        self._advisory_sink: AdvisorySink = advisory_sink or log_advisory

    def fatal(self, message: str, location: SourceLocation) -> Diagnostic:
        """Record a fatal error and enter panic mode.

        Args:
            message: Human-readable summary.
            location: Where the error was detected.

        Returns:
            The recorded diagnostic.
        """
        diagnostic: Diagnostic = self.diagnostics.add_error(message, location)
        if not self.panic:
            logger.debug("Entering panic mode at %s", location)
        self.panic = True
        return diagnostic

    def advisory(self, message: str, location: SourceLocation) -> Diagnostic:
        """Record an advisory message and flush it to the sink right away."""
        diagnostic: Diagnostic = self.diagnostics.add_warning(message, location)
        self._advisory_sink(diagnostic)
        return diagnostic

    def should_skip(self, line: str) -> bool:
        """Return True if ``line`` must be discarded because of panic mode.

        A line carrying a resynchronization tag clears panic mode and is processed
        normally.
        """
        if not self.panic:
            return False
        if is_resync_line(line):
            logger.debug("Leaving panic mode on %r", line)
            self.panic = False
            return False
        return True

    def fatal_errors(self) -> list[Diagnostic]:
        """Return the fatal errors in order of occurrence."""
        return self.diagnostics.errors()

    def advisories(self) -> list[Diagnostic]:
        """Return the advisory messages in order of occurrence."""
        return [d for d in self.diagnostics if d.level == DiagnosticLevel.WARNING]
