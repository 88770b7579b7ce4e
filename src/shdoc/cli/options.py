# topmark:header:start
#
#   project      : shdoc
#   file         : options.py
#   file_relpath : src/shdoc/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for shdoc.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so the group and its commands can stay thin. The helpers here
are Click-aware.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from shdoc.cli.errors import ShdocUsageError
from shdoc.cli_shared.color import ColorMode
from shdoc.config.logging import LogTier

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> LogTier | None:
    """Resolve the diagnostic verbosity tier from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The tier to use, or None when neither flag was given (the
        ``SHDOC_LOG_LEVEL`` environment variable then decides).

    Raises:
        ShdocUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Two or more -v flags select ERROR+INFO+DEBUG.
        One -v flag selects ERROR+INFO.
        One or more -q flags select ERROR only.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ShdocUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 2:  # -vv
        return LogTier.DEBUG
    if verbose_count == 1:  # -v
        return LogTier.INFO
    if quiet_count >= 1:  # -q
        return LogTier.ERROR
    return None


CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase diagnostic verbosity (-v: info, -vv: debug).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color and decoration in diagnostics (equivalent to --color=never).",
    )(f)
    return f
