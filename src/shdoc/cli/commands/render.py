# topmark:header:start
#
#   project      : shdoc
#   file         : render.py
#   file_relpath : src/shdoc/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shdoc ``render`` command.

Parses annotated sources and renders the cross-referenced document. All files
share one cross-reference index. When any fatal documentation error is found,
nothing is written to the primary output, every error is reported on stderr and
the command exits with ``ExitCode.FAILURE``.

Examples:
  Render a script to stdout:

    $ shdoc render lib/util.sh

  Render several files into one document:

    $ shdoc render -o API.md lib/*.sh

  Read a script from STDIN and dump the document model as JSON:

    $ cat lib/util.sh | shdoc render --format json
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shdoc.cli.cli_types import EnumChoiceParam
from shdoc.cli.io import parse_inputs, report_errors, write_output
from shdoc.cli.options import CONTEXT_SETTINGS
from shdoc.cli_shared.exit_codes import ExitCode
from shdoc.config.logging import get_logger
from shdoc.rendering import DocumentFormat, render_document

if TYPE_CHECKING:
    from shdoc.cli_shared.console_api import ConsoleLike
    from shdoc.parser import ParseResult

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render documentation from annotated source files (STDIN when no FILES).",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Markdown to stdout
  shdoc render lib/util.sh

  # One document for several files
  shdoc render -o API.md lib/a.sh lib/b.sh
""",
)
@click.argument("files", nargs=-1, type=str)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(DocumentFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in DocumentFormat)}).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the document to this file instead of stdout.",
)
@click.option(
    "--no-xref",
    "no_xref",
    is_flag=True,
    help="Omit the 'variables referenced' and 'variables set' listings.",
)
def render_command(
    *,
    files: tuple[str, ...],
    output_format: DocumentFormat | None,
    output_path: Path | None,
    no_xref: bool,
) -> None:
    """Render documentation for FILES.

    Args:
        files (tuple[str, ...]): Input paths; ``-`` (or none) reads STDIN.
        output_format (DocumentFormat | None): Output format (Markdown by default).
        output_path (Path | None): Destination file; stdout when None.
        no_xref (bool): Omit the cross-reference listings.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    result: ParseResult = parse_inputs(files, console)
    if result.model is None:
        report_errors(result, console)
        ctx.exit(ExitCode.FAILURE)
        return

    fmt: DocumentFormat = output_format or DocumentFormat.MARKDOWN
    text: str = render_document(result.model, fmt, xref=not no_xref)
    write_output(text, output_path, console)
