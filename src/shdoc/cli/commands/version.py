# topmark:header:start
#
#   project      : shdoc
#   file         : version.py
#   file_relpath : src/shdoc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shdoc ``version`` command.

Prints the current shdoc version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shdoc.constants import SHDOC_VERSION

if TYPE_CHECKING:
    from shdoc.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of shdoc.",
)
def version_command() -> None:
    """Show the current version of shdoc."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(SHDOC_VERSION, bold=True))
