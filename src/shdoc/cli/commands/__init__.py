# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shdoc CLI subcommands."""

from __future__ import annotations
