# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for shdoc (logging and verbosity tiers)."""

from __future__ import annotations
