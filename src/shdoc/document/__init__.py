# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document model: sections, functions, types and cross-reference indexes."""

from __future__ import annotations

from shdoc.document.model import (
    ArgumentEntry,
    CrossReferenceIndex,
    DescriptionText,
    DocumentModel,
    FunctionEntry,
    SectionEntry,
    SourceLocation,
    TypeEntry,
    VariableRef,
)

__all__ = [
    "ArgumentEntry",
    "CrossReferenceIndex",
    "DescriptionText",
    "DocumentModel",
    "FunctionEntry",
    "SectionEntry",
    "SourceLocation",
    "TypeEntry",
    "VariableRef",
]
