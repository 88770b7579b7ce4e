# topmark:header:start
#
#   project      : shdoc
#   file         : console_api.py
#   file_relpath : src/shdoc/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console protocol shared by the shdoc commands.

shdoc writes exactly two kinds of user-facing output: the rendered document (or
the `check` summary) on stdout, and documentation diagnostics on stderr. Advisory
diagnostics use `warn` as they occur; fatal ones use `error` once parsing ends.
Log records go through `shdoc.config.logging` and never through the console.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What `render`, `check` and `version` need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write document text or a summary to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write an advisory diagnostic to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a fatal diagnostic or a host error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
