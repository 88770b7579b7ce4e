# topmark:header:start
#
#   project      : shdoc
#   file         : constants.py
#   file_relpath : src/shdoc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shdoc constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SHDOC_VERSION: str = get_version("shdoc")
except PackageNotFoundError:  # running from a source checkout
    SHDOC_VERSION = "0.0.0"

# Environment variable selecting the diagnostic verbosity tier
LOG_LEVEL_ENV_VAR: str = "SHDOC_LOG_LEVEL"

# Display name used for content read from STDIN
STDIN_DISPLAY_NAME: str = "<stdin>"
