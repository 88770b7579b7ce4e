# topmark:header:start
#
#   project      : shdoc
#   file         : check.py
#   file_relpath : src/shdoc/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shdoc ``check`` command.

Parses annotated sources without rendering them. Prints a one-line summary on
success; on fatal documentation errors prints nothing on stdout, reports every
error on stderr and exits with ``ExitCode.FAILURE``. Useful in CI and pre-commit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shdoc.cli.io import parse_inputs, report_errors
from shdoc.cli.options import CONTEXT_SETTINGS
from shdoc.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from shdoc.cli_shared.console_api import ConsoleLike
    from shdoc.document.model import DocumentModel
    from shdoc.parser import ParseResult


def summarize(model: DocumentModel, n_advisories: int) -> str:
    """Return the one-line summary printed by ``check``."""
    return (
        f"{len(model.sections)} section(s), {len(model.functions)} function(s), "
        f"{len(model.types)} type(s); {n_advisories} warning(s)"
    )


@click.command(
    name="check",
    help="Validate documentation annotations without rendering (STDIN when no FILES).",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("files", nargs=-1, type=str)
def check_command(*, files: tuple[str, ...]) -> None:
    """Validate the annotations in FILES.

    Args:
        files (tuple[str, ...]): Input paths; ``-`` (or none) reads STDIN.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    result: ParseResult = parse_inputs(files, console)
    if result.model is None:
        report_errors(result, console)
        ctx.exit(ExitCode.FAILURE)
        return

    console.print(summarize(result.model, len(result.advisories)))
