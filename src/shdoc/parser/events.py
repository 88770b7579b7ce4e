# topmark:header:start
#
#   project      : shdoc
#   file         : events.py
#   file_relpath : src/shdoc/parser/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tagged events produced by the line classifier.

Every raw line maps to exactly one event. Tag events carry the unparsed text that
followed the tag; interpreting that text (argument names, types, ...) is the job of
the block accumulator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class DeclarationKind(Enum):
    """Shapes of declaration lines recognized as synchronization points."""

    FUNCTION = "function"
    VARIABLE = "variable"


@dataclass(frozen=True)
class SectionTag:
    """``@section TITLE``; ``title`` is empty when the tag carries no text."""

    title: str


@dataclass(frozen=True)
class ArgTag:
    """``@arg ...``."""

    raw: str


@dataclass(frozen=True)
class SetTag:
    """``@set ...``."""

    raw: str


@dataclass(frozen=True)
class EnvTag:
    """``@env ...``."""

    raw: str


@dataclass(frozen=True)
class SeeTag:
    """``@see ...``."""

    raw: str


@dataclass(frozen=True)
class InternalTag:
    """``@internal``."""


@dataclass(frozen=True)
class NoArgsTag:
    """``@noargs``."""


@dataclass(frozen=True)
class TypeTag:
    """``@type``."""


@dataclass(frozen=True)
class DescriptionTag:
    """``@description [TEXT]``.

    Attributes:
        text: Inline text following the tag, or None when the tag stands alone.
        prefix_width: Width of the matched tag prefix up to the start of ``text``.
    """

    text: str | None
    prefix_width: int


@dataclass(frozen=True)
class UnknownTag:
    """A comment line shaped like a tag whose name is not part of the vocabulary."""

    name: str


@dataclass(frozen=True)
class DeclarationLine:
    """A function declaration or variable assignment."""

    name: str
    kind: DeclarationKind


@dataclass(frozen=True)
class CommentLine:
    """A comment line without a tag.

    Attributes:
        prefix_width: Width of the comment marker plus the whitespace after it.
        text: The remainder of the line after that prefix.
    """

    prefix_width: int
    text: str


@dataclass(frozen=True)
class PlainText:
    """Any other line, including blank lines."""

    text: str


Event = Union[
    SectionTag,
    ArgTag,
    SetTag,
    EnvTag,
    SeeTag,
    InternalTag,
    NoArgsTag,
    TypeTag,
    DescriptionTag,
    UnknownTag,
    DeclarationLine,
    CommentLine,
    PlainText,
]
