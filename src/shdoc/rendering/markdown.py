# topmark:header:start
#
#   project      : shdoc
#   file         : markdown.py
#   file_relpath : src/shdoc/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown rendering of the document model.

Layout:

1. ``## Index``: sections, the functions that follow each section, and types.
2. ``## Types``: table of type names and locations.
3. ``## Variables referenced`` / ``## Variables set``: each variable with the
   functions that read or write it (omitted when empty or disabled).
4. The body: ``##`` section headings with their description, then ``###``
   function headings with description, arguments table, variables read and set,
   and "see also" references.

Anchors follow the usual Markdown heading-slug convention (see `anchor`).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from shdoc.config.logging import get_logger
from shdoc.document.model import FunctionEntry, SectionEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from shdoc.document.model import DocumentModel, VariableRef

logger = get_logger(__name__)

INDEX_HEADING: str = "Index"
TYPES_HEADING: str = "Types"
VARIABLES_READ_HEADING: str = "Variables referenced"
VARIABLES_SET_HEADING: str = "Variables set"
NO_ARGUMENTS_NOTE: str = "_Function has no arguments._"

_NON_SLUG_RE: re.Pattern[str] = re.compile(r"[^\w\s]")
_WHITESPACE_RE: re.Pattern[str] = re.compile(r"\s+")


def anchor(name: str) -> str:
    """Return the heading slug for ``name``.

    Lowercases the name, drops every character that is not alphanumeric, whitespace
    or underscore, and replaces whitespace runs with single hyphens.

    Examples:
        >>> anchor("File Utilities")
        'file-utilities'
        >>> anchor("my_func::v2()")
        'my_funcv2'
    """
    return _WHITESPACE_RE.sub("-", _NON_SLUG_RE.sub("", name.lower()))


def link(name: str) -> str:
    """Return a Markdown link to the heading of ``name``."""
    return f"[{name}](#{anchor(name)})"


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def render_markdown_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: A sequence of row sequences (each row same length as ``headers``).

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    cells: list[list[str]] = [[_escape_cell(str(c)) for c in r] for r in rows]

    widths: list[int] = [len(str(h)) for h in headers]
    for r in cells:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _pad(text: str, w: int) -> str:
        return f"{text:<{w}}"

    def _sep_for(i: int) -> str:
        return "-" * max(3, widths[i])

    header_line: str = " | ".join(_pad(str(headers[i]), widths[i]) for i in range(ncols))
    sep_line: str = " | ".join(_sep_for(i) for i in range(ncols))
    data_lines: list[str] = [
        " | ".join(_pad(r[i], widths[i]) for i in range(ncols)) for r in cells
    ]

    out: list[str] = [f"| {header_line} |", f"| {sep_line} |"]
    out.extend(f"| {line} |" for line in data_lines)
    return "\n".join(out) + "\n"


def _bullets(items: Iterable[str]) -> list[str]:
    return [f"* {item}" for item in items]


def _render_index(model: DocumentModel) -> list[str]:
    lines: list[str] = [f"## {INDEX_HEADING}", ""]
    in_section: bool = False
    for entry in model.entries:
        if isinstance(entry, SectionEntry):
            lines.append(f"* {link(entry.title)}")
            in_section = True
        else:
            indent: str = "  " if in_section else ""
            lines.append(f"{indent}* {link(entry.name)}")
    if model.types:
        lines.append(f"* {link(TYPES_HEADING)}")
        lines.extend(f"  * {link(t.name)}" for t in model.types)
    lines.append("")
    return lines


def _render_types(model: DocumentModel) -> list[str]:
    rows: list[list[str]] = [
        [f'<a name="{anchor(t.name)}"></a>{t.name}', str(t.location)] for t in model.types
    ]
    return [f"## {TYPES_HEADING}", "", render_markdown_table(["Name", "Location"], rows)]


def _render_xref(heading: str, pairs: Iterable[tuple[str, list[str]]]) -> list[str]:
    items: list[str] = [
        f"**{name}**: {', '.join(link(fn) for fn in functions)}" for name, functions in pairs
    ]
    if not items:
        return []
    return [f"## {heading}", "", *_bullets(items), ""]


def _render_variables(heading: str, refs: Sequence[VariableRef]) -> list[str]:
    if not refs:
        return []
    items: list[str] = [
        f"**{ref.name}**: {ref.description}" if ref.description else f"**{ref.name}**"
        for ref in refs
    ]
    return [f"#### {heading}", "", *_bullets(items), ""]


def _render_see(see: Sequence[str], known: set[str]) -> list[str]:
    if not see:
        return []
    items: list[str] = [link(ref) if ref in known else ref for ref in see]
    return ["#### See also", "", *_bullets(items), ""]


def _render_function(entry: FunctionEntry, known: set[str]) -> list[str]:
    lines: list[str] = [f"### {entry.name}", ""]
    if entry.description:
        lines.extend([entry.description.text, ""])

    if entry.arguments:
        rows: list[list[str]] = [[a.name, a.type, a.description] for a in entry.arguments]
        lines.extend(
            [
                "#### Arguments",
                "",
                render_markdown_table(["Name", "Type", "Description"], rows),
            ]
        )
    elif entry.noargs:
        lines.extend([NO_ARGUMENTS_NOTE, ""])

    lines.extend(_render_variables("Variables read", entry.env_vars))
    lines.extend(_render_variables("Variables set", entry.set_vars))
    lines.extend(_render_see(entry.see, known))
    return lines


def _render_section(entry: SectionEntry) -> list[str]:
    lines: list[str] = [f"## {entry.title}", ""]
    if entry.description:
        lines.extend([entry.description.text, ""])
    return lines


def render_markdown(model: DocumentModel, *, xref: bool = True) -> str:
    """Render the document model as Markdown.

    Args:
        model: The document model.
        xref: Include the "variables referenced" and "variables set" listings.

    Returns:
        The Markdown document, ending with a single newline.
    """
    known: set[str] = {f.name for f in model.functions}
    logger.debug(
        "Rendering %d entries and %d types as Markdown", len(model.entries), len(model.types)
    )

    lines: list[str] = _render_index(model)
    if model.types:
        lines.extend(_render_types(model))
    if xref:
        lines.extend(_render_xref(VARIABLES_READ_HEADING, model.xref.iter_read_by()))
        lines.extend(_render_xref(VARIABLES_SET_HEADING, model.xref.iter_written_by()))

    for entry in model.entries:
        if isinstance(entry, SectionEntry):
            lines.extend(_render_section(entry))
        else:
            lines.extend(_render_function(entry, known))

    return "\n".join(lines).rstrip("\n") + "\n"
