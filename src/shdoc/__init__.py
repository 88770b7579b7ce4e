# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shdoc package.

shdoc extracts documentation from annotated ``#`` comment blocks (``@description``,
``@arg``, ``@env``, ``@set``, ...) that precede function declarations and variable
assignments in shell-style sources, and renders it as a cross-referenced document.
It exposes both a CLI and a small parsing API (`shdoc.parser`).
"""

from __future__ import annotations
