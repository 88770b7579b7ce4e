# topmark:header:start
#
#   project      : shdoc
#   file         : logging.py
#   file_relpath : src/shdoc/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom shdoc logging with three verbosity tiers.

This module configures the standard logging module for shdoc: a fixed set of
verbosity tiers (ERROR, ERROR+INFO, ERROR+INFO+DEBUG), resolution of the tier from
the ``SHDOC_LOG_LEVEL`` environment variable, and colored output formatting.

Log records always go to ``stderr`` so the rendered document on ``stdout`` stays clean.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import IntEnum

from yachalk import chalk

from shdoc.constants import LOG_LEVEL_ENV_VAR


class LogTier(IntEnum):
    """Diagnostic verbosity tiers, mapped to standard logging levels.

    Attributes:
        ERROR: Errors only.
        INFO: Errors and informational messages.
        DEBUG: Errors, informational and debug messages.
    """

    ERROR = logging.ERROR
    INFO = logging.INFO
    DEBUG = logging.DEBUG


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        # Apply color styles to the message depending on the log severity
        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        return chalk.gray(message)


def clamp_to_tier(level: int) -> LogTier:
    """Map an arbitrary logging level onto the closest enclosing tier.

    Anything at or below DEBUG selects the DEBUG tier, anything up to INFO selects
    the INFO tier, everything else (WARNING, ERROR, CRITICAL) selects ERROR.

    Args:
        level (int): A standard (or numeric) logging level.

    Returns:
        LogTier: The tier to configure.
    """
    if level <= logging.DEBUG:
        return LogTier.DEBUG
    if level <= logging.INFO:
        return LogTier.INFO
    return LogTier.ERROR


def resolve_env_log_level() -> LogTier | None:
    """Return a verbosity tier from the environment or None if unset.

    Honors SHDOC_LOG_LEVEL (e.g., "ERROR", "INFO", "DEBUG", numeric "10").
    Unknown values are ignored.
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return clamp_to_tier(int(v))
    name_to_level = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
        "FATAL": logging.CRITICAL,
    }
    level = name_to_level.get(v)
    if level is None:
        return None
    return clamp_to_tier(level)


def setup_logging(level: int | None = None, *, color: bool = True) -> None:
    """Configure the root logger with a verbosity tier and (optionally) colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][shdoc.config.logging.resolve_env_log_level].
    Default is the ERROR tier when unspecified.

    Args:
        level (int | None): Logging level; clamped to one of the three tiers.
        color (bool): Use the chalk formatter when True, a plain formatter otherwise.
    """
    tier: LogTier = clamp_to_tier(level) if level is not None else (
        resolve_env_log_level() or LogTier.ERROR
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(tier)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    fmt: str = LOG_FORMAT if tier >= LogTier.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt) if color else logging.Formatter(fmt))
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Retrieve a logger with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The logger instance.
    """
    return logging.getLogger(name)
