# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for shdoc."""

from __future__ import annotations
