# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by CLI frontends (console protocol, color, exit codes)."""

from __future__ import annotations
