# topmark:header:start
#
#   project      : shdoc
#   file         : __init__.py
#   file_relpath : src/shdoc/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderers turning a `DocumentModel` into final text.

Renderers only consume the document model; they have no parsing responsibility and
can be swapped without touching the parser.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shdoc.rendering.formats import DocumentFormat
from shdoc.rendering.machine import render_json
from shdoc.rendering.markdown import anchor, render_markdown

if TYPE_CHECKING:
    from shdoc.document.model import DocumentModel

__all__ = [
    "DocumentFormat",
    "anchor",
    "render_document",
    "render_json",
    "render_markdown",
]


def render_document(
    model: DocumentModel,
    fmt: DocumentFormat = DocumentFormat.MARKDOWN,
    *,
    xref: bool = True,
) -> str:
    """Render ``model`` in the requested format.

    Args:
        model: The document model to render.
        fmt: Target format.
        xref: Include the "variables referenced/set" listings (Markdown only).

    Returns:
        The rendered document, ending with a newline.
    """
    if fmt == DocumentFormat.JSON:
        return render_json(model)
    return render_markdown(model, xref=xref)
