# topmark:header:start
#
#   project      : shdoc
#   file         : main.py
#   file_relpath : src/shdoc/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shdoc Click CLI: group-level options plus the ``render``, ``check`` and ``version`` commands.

Group-level options (verbosity and color) are resolved once and placed into
``ctx.obj`` together with the console, so subcommands stay thin.
"""

from __future__ import annotations

import click

from shdoc.cli.commands.check import check_command
from shdoc.cli.commands.render import render_command
from shdoc.cli.commands.version import version_command
from shdoc.cli.console import ClickConsole
from shdoc.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from shdoc.cli_shared.color import ColorMode, resolve_color_mode
from shdoc.config.logging import LogTier, get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    override: ColorMode | None = (
        ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else None)
    )
    enable_color: bool = resolve_color_mode(color_mode_override=override)
    ctx.color = enable_color

    # CLI flags win over SHDOC_LOG_LEVEL; ERROR only by default.
    tier: LogTier = resolve_verbosity(verbose, quiet) or resolve_env_log_level() or LogTier.ERROR
    setup_logging(level=tier, color=enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: tier=%s color=%s", tier.name, enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="shdoc: render documentation from annotated shell comments.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the shdoc CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'shdoc render [FILES...]' to generate documentation.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(check_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
