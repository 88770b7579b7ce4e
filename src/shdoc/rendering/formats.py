# topmark:header:start
#
#   project      : shdoc
#   file         : formats.py
#   file_relpath : src/shdoc/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines the available document output formats."""

from enum import Enum


class DocumentFormat(str, Enum):
    """shdoc document output formats.

    Members:
      MARKDOWN: Cross-referenced Markdown document (default).
      JSON: The document model as a single JSON object (machine-readable).

    Notes:
      - Machine formats never include ANSI color.
      - Use with `EnumChoiceParam` to parse ``--format`` from Click.
    """

    MARKDOWN = "markdown"
    JSON = "json"
