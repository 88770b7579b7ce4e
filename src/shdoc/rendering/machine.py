# topmark:header:start
#
#   project      : shdoc
#   file         : machine.py
#   file_relpath : src/shdoc/rendering/machine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (JSON) rendering of the document model."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shdoc.document.model import DocumentModel


def render_json(model: DocumentModel, *, indent: int | None = 2) -> str:
    """Serialize the document model as JSON.

    Key order follows `DocumentModel.to_dict`, so the output is stable across runs.

    Args:
        model: The document model.
        indent: Indentation passed to `json.dumps`; None for a compact single line.

    Returns:
        The JSON document, ending with a newline.
    """
    return json.dumps(model.to_dict(), indent=indent, ensure_ascii=False) + "\n"
