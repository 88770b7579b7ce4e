# topmark:header:start
#
#   project      : shdoc
#   file         : io.py
#   file_relpath : src/shdoc/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input/output helpers shared by the shdoc commands.

Input modes supported:
  • **Paths mode (default)**: one or more PATHS, parsed in the given order into a
    single parser context so the cross-reference index spans every file.
  • **Content on STDIN**: no PATHS, or a single ``-`` among them.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shdoc.cli.errors import (
    ShdocEncodingError,
    ShdocFileNotFoundError,
    ShdocIOError,
    ShdocUsageError,
)
from shdoc.config.logging import get_logger
from shdoc.constants import STDIN_DISPLAY_NAME
from shdoc.diagnostic.model import format_diagnostic
from shdoc.parser import ParserContext

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shdoc.cli_shared.console_api import ConsoleLike
    from shdoc.diagnostic.model import Diagnostic
    from shdoc.parser import ParseResult

logger = get_logger(__name__)

STDIN_PATH: str = "-"


def plan_inputs(files: Sequence[str]) -> list[str]:
    """Return the inputs to parse; STDIN when no file was given.

    Raises:
        ShdocUsageError: If ``-`` is given more than once.
    """
    inputs: list[str] = list(files) or [STDIN_PATH]
    if inputs.count(STDIN_PATH) > 1:
        raise ShdocUsageError("'-' (STDIN) may be given at most once.")
    return inputs


def parse_inputs(files: Sequence[str], console: ConsoleLike) -> ParseResult:
    """Parse every input into one shared parser context.

    Advisory diagnostics are written to the console's error stream as they occur.

    Args:
        files: Paths from the command line (``-`` for STDIN).
        console: Console receiving advisory diagnostics.

    Returns:
        The parse result for the whole run.

    Raises:
        ShdocFileNotFoundError: If an input path does not exist.
        ShdocEncodingError: If an input is not valid UTF-8.
        ShdocIOError: If an input cannot be read.
    """

    def _advise(diagnostic: Diagnostic) -> None:
        console.warn(format_diagnostic(diagnostic))

    ctx = ParserContext(advisory_sink=_advise)
    for name in plan_inputs(files):
        if name == STDIN_PATH:
            logger.info("Reading content from STDIN")
            ctx.parse_text(click.get_text_stream("stdin").read(), file=STDIN_DISPLAY_NAME)
            continue

        path = Path(name)
        if not path.exists():
            raise ShdocFileNotFoundError(f"No such file: {name}")
        if path.is_dir():
            raise ShdocIOError(f"Not a file: {name}")
        try:
            ctx.parse_file(path, display_name=name)
        except UnicodeDecodeError as exc:
            raise ShdocEncodingError(f"Cannot decode {name} as UTF-8: {exc}") from exc
        except OSError as exc:
            raise ShdocIOError(f"Cannot read {name}: {exc}") from exc
    return ctx.finish()


def report_errors(result: ParseResult, console: ConsoleLike) -> None:
    """Write every fatal error of ``result`` to the console's error stream."""
    for diagnostic in result.errors:
        console.error(format_diagnostic(diagnostic))


def write_output(text: str, output_path: Path | None, console: ConsoleLike) -> None:
    """Write the rendered document to ``output_path`` or to stdout.

    Raises:
        ShdocIOError: If the output file cannot be written.
    """
    if output_path is None:
        console.print(text, nl=False)
        return
    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ShdocIOError(f"Cannot write {output_path}: {exc}") from exc
    logger.info("Wrote %s", output_path)
