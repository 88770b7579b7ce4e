# topmark:header:start
#
#   project      : shdoc
#   file         : model.py
#   file_relpath : src/shdoc/document/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document model produced by the annotation parser.

The model is a pure aggregation: finalized entries are appended in arrival order,
and every emitted function feeds the two cross-reference mappings (variables
read, variables written). Renderers consume the model once the scan completes.

Sections:
    * SourceLocation: file + 1-based line, attached to every entry.
    * DescriptionText: normalized multi-line description.
    * ArgumentEntry / VariableRef: items collected on a function.
    * FunctionEntry / TypeEntry / SectionEntry: finalized entries.
    * CrossReferenceIndex: ``read_by`` and ``written_by`` mappings.
    * DocumentModel: ordered entries, ordered types and the index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class SourceLocation:
    """Origin of an entry: file identifier and 1-based line number."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass
class DescriptionText:
    """Normalized multi-line text block.

    Blank entries in ``lines`` are paragraph breaks. Leading and trailing blank
    lines are not significant and are trimmed by `text`.
    """

    lines: list[str] = field(default_factory=lambda: [])

    @property
    def text(self) -> str:
        """Return the description as a single string with ``\\n`` separators."""
        lines: list[str] = [line.rstrip() for line in self.lines]
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines)

    def __bool__(self) -> bool:
        return bool(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ArgumentEntry:
    """One ``@arg`` item: name, optional type and optional one-line description."""

    name: str
    type: str = ""
    description: str = ""


@dataclass(frozen=True)
class VariableRef:
    """One ``@env`` or ``@set`` item: a variable name and optional description."""

    name: str
    description: str = ""


@dataclass
class FunctionEntry:
    """A documented function."""

    name: str
    location: SourceLocation
    description: DescriptionText = field(default_factory=DescriptionText)
    arguments: list[ArgumentEntry] = field(default_factory=lambda: [])
    env_vars: list[VariableRef] = field(default_factory=lambda: [])
    set_vars: list[VariableRef] = field(default_factory=lambda: [])
    see: list[str] = field(default_factory=lambda: [])
    internal: bool = False
    noargs: bool = False

    @property
    def has_inconsistent_args(self) -> bool:
        """True if ``@noargs`` was declared together with one or more ``@arg``."""
        return self.noargs and bool(self.arguments)


@dataclass(frozen=True)
class TypeEntry:
    """A documented type, named after the variable assignment following ``@type``."""

    name: str
    location: SourceLocation


@dataclass
class SectionEntry:
    """A section heading with an optional description."""

    title: str
    location: SourceLocation
    description: DescriptionText = field(default_factory=DescriptionText)


Entry = Union[SectionEntry, FunctionEntry]


@dataclass
class CrossReferenceIndex:
    """Variable name to referencing function names, for reads and writes.

    Value sets are unordered; `iter_read_by` and `iter_written_by` yield in
    lexicographic order so rendering stays deterministic.
    """

    read_by: dict[str, set[str]] = field(default_factory=lambda: {})
    written_by: dict[str, set[str]] = field(default_factory=lambda: {})

    def add_function(self, entry: FunctionEntry) -> None:
        """Record the env/set lists of a function entry."""
        for ref in entry.env_vars:
            self.read_by.setdefault(ref.name, set()).add(entry.name)
        for ref in entry.set_vars:
            self.written_by.setdefault(ref.name, set()).add(entry.name)

    def iter_read_by(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(variable, sorted functions)`` pairs for variables read."""
        return _sorted_items(self.read_by)

    def iter_written_by(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(variable, sorted functions)`` pairs for variables written."""
        return _sorted_items(self.written_by)

    def __bool__(self) -> bool:
        return bool(self.read_by or self.written_by)


def _sorted_items(mapping: dict[str, set[str]]) -> Iterator[tuple[str, list[str]]]:
    for name in sorted(mapping):
        yield name, sorted(mapping[name])


@dataclass
class DocumentModel:
    """Accumulated documentation for one run.

    Attributes:
        entries: Sections and functions, interleaved in source order.
        types: Type entries in source order.
        xref: The cross-reference index built from emitted functions.
    """

    entries: list[Entry] = field(default_factory=lambda: [])
    types: list[TypeEntry] = field(default_factory=lambda: [])
    xref: CrossReferenceIndex = field(default_factory=CrossReferenceIndex)

    def add_section(self, entry: SectionEntry) -> None:
        """Append a finalized section."""
        self.entries.append(entry)

    def add_function(self, entry: FunctionEntry) -> None:
        """Append a finalized function and index its variable references."""
        self.entries.append(entry)
        self.xref.add_function(entry)

    def add_type(self, entry: TypeEntry) -> None:
        """Append a finalized type."""
        self.types.append(entry)

    @property
    def sections(self) -> list[SectionEntry]:
        """Return the sections in source order."""
        return [e for e in self.entries if isinstance(e, SectionEntry)]

    @property
    def functions(self) -> list[FunctionEntry]:
        """Return the functions in source order."""
        return [e for e in self.entries if isinstance(e, FunctionEntry)]

    def is_empty(self) -> bool:
        """Return True if nothing was emitted."""
        return not self.entries and not self.types

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the whole model."""
        return {
            "entries": [_entry_to_dict(e) for e in self.entries],
            "types": [
                {"name": t.name, "file": t.location.file, "line": t.location.line}
                for t in self.types
            ],
            "variables_read": dict(self.xref.iter_read_by()),
            "variables_set": dict(self.xref.iter_written_by()),
        }


def _entry_to_dict(entry: Entry) -> dict[str, Any]:
    if isinstance(entry, SectionEntry):
        return {
            "kind": "section",
            "title": entry.title,
            "description": entry.description.text,
            "file": entry.location.file,
            "line": entry.location.line,
        }
    return {
        "kind": "function",
        "name": entry.name,
        "description": entry.description.text,
        "arguments": [
            {"name": a.name, "type": a.type, "description": a.description}
            for a in entry.arguments
        ],
        "env": [{"name": r.name, "description": r.description} for r in entry.env_vars],
        "set": [{"name": r.name, "description": r.description} for r in entry.set_vars],
        "see": list(entry.see),
        "noargs": entry.noargs,
        "file": entry.location.file,
        "line": entry.location.line,
    }
