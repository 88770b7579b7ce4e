# topmark:header:start
#
#   project      : shdoc
#   file         : errors.py
#   file_relpath : src/shdoc/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the shdoc CLI.

Usage:
    Raise these exceptions in CLI commands to signal host-level errors (missing
    input, unreadable files, bad usage) with standardized messages and exit codes.
    Documentation errors found by the parser are not exceptions; they are
    diagnostics reported by the commands.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from shdoc.cli_shared.exit_codes import ExitCode


class ShdocError(click.ClickException):
    """Base class for all shdoc CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class ShdocUsageError(ShdocError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ShdocFileNotFoundError(ShdocError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ShdocIOError(ShdocError):
    """Error for I/O errors reading input or writing output."""

    exit_code = ExitCode.IO_ERROR


class ShdocEncodingError(ShdocError):
    """Error for text decoding errors (input is not valid UTF-8)."""

    exit_code = ExitCode.ENCODING_ERROR
