# topmark:header:start
#
#   project      : shdoc
#   file         : classifier.py
#   file_relpath : src/shdoc/parser/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classifier for the annotation grammar.

Classification is purely syntactic: one raw line in, one
[`Event`][shdoc.parser.events.Event] out, no lookahead and no side effects.

The grammar is a declarative table. Each `TagRule` pairs a compiled pattern with a
builder returning the event variant, and records whether the tag belongs to the
resynchronization set that ends panic mode.

Comment lines start with ``#`` (after optional indentation). Non-comment lines are
checked against two function declaration shapes and two variable assignment shapes;
anything else is plain text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shdoc.parser.events import (
    ArgTag,
    CommentLine,
    DeclarationKind,
    DeclarationLine,
    DescriptionTag,
    EnvTag,
    InternalTag,
    NoArgsTag,
    PlainText,
    SectionTag,
    SeeTag,
    SetTag,
    TypeTag,
    UnknownTag,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from shdoc.parser.events import Event


@dataclass(frozen=True)
class TagRule:
    """One row of the tag table.

    Attributes:
        name: Tag name without the ``@``.
        pattern: Compiled pattern with ``prefix`` and ``rest`` groups.
        build: Builds the event from a successful match.
        resync: True if a line carrying this tag ends panic mode.
    """

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], Event]
    resync: bool


def _tag_pattern(name: str) -> re.Pattern[str]:
    # The tag name must be followed by whitespace or end of line: "@args" is not "@arg".
    return re.compile(rf"^(?P<prefix>\s*#\s*@{name}(?:\s+|$))(?P<rest>.*)$")


def _rest(match: re.Match[str]) -> str:
    return match.group("rest").rstrip()


def _build_description(match: re.Match[str]) -> DescriptionTag:
    text: str = _rest(match)
    return DescriptionTag(text=text or None, prefix_width=len(match.group("prefix")))


TAG_RULES: tuple[TagRule, ...] = (
    TagRule("section", _tag_pattern("section"), lambda m: SectionTag(_rest(m)), True),
    TagRule("description", _tag_pattern("description"), _build_description, True),
    TagRule("arg", _tag_pattern("arg"), lambda m: ArgTag(_rest(m)), True),
    TagRule("set", _tag_pattern("set"), lambda m: SetTag(_rest(m)), True),
    TagRule("env", _tag_pattern("env"), lambda m: EnvTag(_rest(m)), True),
    TagRule("type", _tag_pattern("type"), lambda _m: TypeTag(), True),
    TagRule("noargs", _tag_pattern("noargs"), lambda _m: NoArgsTag(), True),
    # Not part of the resynchronization set: after a fatal error these are dropped
    # until one of the tags above shows up.
    TagRule("see", _tag_pattern("see"), lambda m: SeeTag(_rest(m)), False),
    TagRule("internal", _tag_pattern("internal"), lambda _m: InternalTag(), False),
)

RESYNC_TAGS: frozenset[str] = frozenset(rule.name for rule in TAG_RULES if rule.resync)

_COMMENT_RE: re.Pattern[str] = re.compile(r"^(?P<prefix>\s*#\s*)(?P<text>.*)$")
_UNKNOWN_TAG_RE: re.Pattern[str] = re.compile(r"^\s*#\s*@(?P<name>[A-Za-z_][\w-]*)(?=\s|$)")

_FUNCTION_NAME: str = r"[A-Za-z_][A-Za-z0-9_:.\-]*"
_VARIABLE_NAME: str = r"[A-Za-z_][A-Za-z0-9_]*"

DECLARATION_RULES: tuple[tuple[re.Pattern[str], DeclarationKind], ...] = (
    # function name [()] [{]
    (re.compile(rf"^\s*function\s+(?P<name>{_FUNCTION_NAME})"), DeclarationKind.FUNCTION),
    # name() [{]
    (re.compile(rf"^\s*(?P<name>{_FUNCTION_NAME})\s*\(\s*\)"), DeclarationKind.FUNCTION),
    # declare -A name / readonly name=... / export name
    (
        re.compile(
            r"^\s*(?:declare|typeset|local|readonly|export)(?:\s+-[A-Za-z]+)*"
            rf"\s+(?P<name>{_VARIABLE_NAME})"
        ),
        DeclarationKind.VARIABLE,
    ),
    # name=... / name+=... / name[key]=...
    (
        re.compile(rf"^\s*(?P<name>{_VARIABLE_NAME})(?:\[[^\]]*\])?\+?="),
        DeclarationKind.VARIABLE,
    ),
)


def classify(line: str) -> Event:
    """Classify one raw source line.

    Args:
        line: The line, without its trailing newline.

    Returns:
        The event variant for the line. Comment lines yield a tag event,
        `UnknownTag` or `CommentLine`; other lines yield `DeclarationLine`
        or `PlainText`.
    """
    comment: re.Match[str] | None = _COMMENT_RE.match(line)
    if comment is not None:
        for rule in TAG_RULES:
            match: re.Match[str] | None = rule.pattern.match(line)
            if match is not None:
                return rule.build(match)
        unknown: re.Match[str] | None = _UNKNOWN_TAG_RE.match(line)
        if unknown is not None:
            return UnknownTag(unknown.group("name"))
        return CommentLine(prefix_width=len(comment.group("prefix")), text=comment.group("text"))

    for pattern, kind in DECLARATION_RULES:
        match = pattern.match(line)
        if match is not None:
            return DeclarationLine(name=match.group("name"), kind=kind)
    return PlainText(line)


def is_resync_line(line: str) -> bool:
    """Return True if ``line`` carries a tag from the resynchronization set.

    Used while the parser is in panic mode; like `classify` it is pure.
    """
    return any(rule.resync and rule.pattern.match(line) for rule in TAG_RULES)
