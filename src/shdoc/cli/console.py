# topmark:header:start
#
#   project      : shdoc
#   file         : console.py
#   file_relpath : src/shdoc/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for the shdoc commands.

`ClickConsole` keeps the document stream clean: `print` is the only method that
writes to stdout, so piping ``shdoc render`` into a file never captures
diagnostics. Advisories are yellow and fatal errors bright red on stderr, and
both degrade to plain text when color is off (``--no-color``, ``NO_COLOR`` or a
non-TTY stderr).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from shdoc.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Document output on ``out``, diagnostics on ``err``.

    Args:
        enable_color (bool): Emit ANSI styles; plain text otherwise.
        out (TextIO | None): Document stream. Defaults to `sys.stdout`.
        err (TextIO | None): Diagnostic stream. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write rendered document text or a summary line to the document stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a formatted advisory diagnostic to the diagnostic stream."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a fatal diagnostic or a host-level error to the diagnostic stream."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
