# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics reported while parsing annotated sources."""

from __future__ import annotations

from shdoc.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    format_diagnostic,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "format_diagnostic",
]
