# topmark:header:start
#
#   project      : shdoc
#   file         : block.py
#   file_relpath : src/shdoc/parser/block.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block accumulator: the in-progress documentation block.

The accumulator owns the pending section title, the pending function fields and the
pending ``@type`` flag until a synchronization line flushes them into the document
model. Scalar fields are last-write-wins; list fields keep declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shdoc.document.model import (
    ArgumentEntry,
    DescriptionText,
    FunctionEntry,
    SectionEntry,
    SourceLocation,
    VariableRef,
)


def parse_argument(raw: str) -> ArgumentEntry | None:
    """Parse the text of an ``@arg`` tag.

    The accepted form is ``NAME [{TYPE}] [DESCRIPTION]``.

    Args:
        raw: Text following the tag.

    Returns:
        The argument, or None when no name is present.

    Examples:
        >>> parse_argument("x    Input value")
        ArgumentEntry(name='x', type='', description='Input value')
        >>> parse_argument("$1 {string} Path to the file")
        ArgumentEntry(name='$1', type='string', description='Path to the file')
    """
    parts: list[str] = raw.split(None, 1)
    if not parts or parts[0].startswith("{"):
        return None
    name: str = parts[0]
    rest: str = parts[1].strip() if len(parts) > 1 else ""
    arg_type: str = ""
    if rest.startswith("{"):
        end: int = rest.find("}")
        if end != -1:
            arg_type = rest[1:end].strip()
            rest = rest[end + 1 :].strip()
    return ArgumentEntry(name=name, type=arg_type, description=rest)


def parse_variable(raw: str) -> VariableRef | None:
    """Parse the text of an ``@env`` or ``@set`` tag (``NAME [DESCRIPTION]``)."""
    parts: list[str] = raw.split(None, 1)
    if not parts:
        return None
    return VariableRef(name=parts[0], description=parts[1].strip() if len(parts) > 1 else "")


def _add_unique(refs: list[VariableRef], ref: VariableRef) -> None:
    if all(existing.name != ref.name for existing in refs):
        refs.append(ref)


@dataclass
class BlockAccumulator:
    """Fields of the block being accumulated."""

    section_title: str | None = None
    section_location: SourceLocation | None = None
    description: DescriptionText | None = None
    arguments: list[ArgumentEntry] = field(default_factory=lambda: [])
    env_vars: list[VariableRef] = field(default_factory=lambda: [])
    set_vars: list[VariableRef] = field(default_factory=lambda: [])
    see: list[str] = field(default_factory=lambda: [])
    internal: bool = False
    noargs: bool = False
    type_pending: bool = False

    def set_section(self, title: str, location: SourceLocation) -> None:
        """Set the pending section; a second one before a flush replaces the first."""
        self.section_title = title
        self.section_location = location

    def add_env(self, ref: VariableRef) -> None:
        """Record a variable read (names are unique within a block)."""
        _add_unique(self.env_vars, ref)

    def add_set(self, ref: VariableRef) -> None:
        """Record a variable write (names are unique within a block)."""
        _add_unique(self.set_vars, ref)

    def has_function_content(self) -> bool:
        """True if any function-level field was collected."""
        return bool(
            self.description is not None
            or self.arguments
            or self.env_vars
            or self.set_vars
            or self.see
            or self.internal
            or self.noargs
        )

    def is_empty(self) -> bool:
        """True if nothing at all is pending."""
        return self.section_title is None and not self.type_pending and not (
            self.has_function_content()
        )

    def build_function(self, name: str, location: SourceLocation) -> FunctionEntry:
        """Finalize the pending function fields into a `FunctionEntry`."""
        return FunctionEntry(
            name=name,
            location=location,
            description=self.description or DescriptionText(),
            arguments=list(self.arguments),
            env_vars=list(self.env_vars),
            set_vars=list(self.set_vars),
            see=list(self.see),
            internal=self.internal,
            noargs=self.noargs,
        )

    def build_section(self, *, with_description: bool = True) -> SectionEntry:
        """Finalize the pending section.

        Args:
            with_description: Attach the pending description to the section. False
                when the description belongs to a function declared right after.
        """
        assert self.section_title is not None and self.section_location is not None
        description: DescriptionText = (
            self.description if with_description and self.description else DescriptionText()
        )
        return SectionEntry(
            title=self.section_title,
            location=self.section_location,
            description=description,
        )

    def reset(self) -> None:
        """Drop every pending field."""
        self.section_title = None
        self.section_location = None
        self.description = None
        self.arguments = []
        self.env_vars = []
        self.set_vars = []
        self.see = []
        self.internal = False
        self.noargs = False
        self.type_pending = False
