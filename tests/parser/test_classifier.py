# topmark:header:start
#
#   project      : shdoc
#   file         : test_classifier.py
#   file_relpath : tests/parser/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classifier: tag table, comment prefixes and declaration shapes."""

from __future__ import annotations

from shdoc.parser.classifier import RESYNC_TAGS, classify, is_resync_line
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
from tests.conftest import mark_parser, parametrize


@mark_parser
@parametrize(
    "line, expected",
    [
        ("# @section File utilities", SectionTag("File utilities")),
        ("# @section", SectionTag("")),
        ("# @section    ", SectionTag("")),
        ("# @arg   x    Input value", ArgTag("x    Input value")),
        ("    # @set RESULT the result", SetTag("RESULT the result")),
        ("#@env HOME", EnvTag("HOME")),
        ("# @see other_func", SeeTag("other_func")),
        ("# @internal", InternalTag()),
        ("# @noargs", NoArgsTag()),
        ("# @type", TypeTag()),
    ],
)
def test_tag_lines(line: str, expected: object) -> None:
    """Each tag line yields its event variant with the trailing text."""
    assert classify(line) == expected


@mark_parser
def test_description_tag_records_prefix_width() -> None:
    """The prefix width covers the marker, the tag and the whitespace after it."""
    assert classify("# @description Computes.") == DescriptionTag("Computes.", 15)
    assert classify("# @description") == DescriptionTag(None, 14)
    assert classify("  #  @description   x") == DescriptionTag("x", 20)


@mark_parser
def test_tag_name_must_end_at_word_boundary() -> None:
    """``@args`` is an unknown tag, not ``@arg``."""
    assert classify("# @args x") == UnknownTag("args")
    assert classify("# @example foo") == UnknownTag("example")


@mark_parser
@parametrize(
    "line, prefix_width, text",
    [
        ("#", 1, ""),
        ("# plain comment", 2, "plain comment"),
        ("#    indented", 5, "indented"),
        ("   # x", 5, "x"),
        ("# mail me at a@b.c", 2, "mail me at a@b.c"),
    ],
)
def test_untagged_comments(line: str, prefix_width: int, text: str) -> None:
    """Untagged comments carry their prefix width and remaining text."""
    assert classify(line) == CommentLine(prefix_width=prefix_width, text=text)


@mark_parser
@parametrize(
    "line, name, kind",
    [
        ("function myfunc(x) { ... }", "myfunc", DeclarationKind.FUNCTION),
        ("function my::ns.func {", "my::ns.func", DeclarationKind.FUNCTION),
        ("myfunc() {", "myfunc", DeclarationKind.FUNCTION),
        ("  helper ( ) {", "helper", DeclarationKind.FUNCTION),
        ("declare -A CONFIG", "CONFIG", DeclarationKind.VARIABLE),
        ("readonly -a LIST=(a b)", "LIST", DeclarationKind.VARIABLE),
        ("export PATH", "PATH", DeclarationKind.VARIABLE),
        ("COUNT=0", "COUNT", DeclarationKind.VARIABLE),
        ("MAP[key]=value", "MAP", DeclarationKind.VARIABLE),
        ("ITEMS+=(x)", "ITEMS", DeclarationKind.VARIABLE),
    ],
)
def test_declarations(line: str, name: str, kind: DeclarationKind) -> None:
    """Function headers and variable assignments are synchronization lines."""
    assert classify(line) == DeclarationLine(name=name, kind=kind)


@mark_parser
@parametrize("line", ["", "   ", "echo hello", "if [ -z \"$x\" ]; then", "}", "a == b"])
def test_plain_text(line: str) -> None:
    """Everything else, including blank lines, is plain text."""
    assert classify(line) == PlainText(line)


@mark_parser
def test_resync_set_is_narrow() -> None:
    """``@see`` and ``@internal`` do not end panic mode."""
    assert RESYNC_TAGS == frozenset(
        {"section", "description", "arg", "set", "env", "type", "noargs"}
    )
    assert is_resync_line("# @arg x")
    assert is_resync_line("# @description")
    assert not is_resync_line("# @see other")
    assert not is_resync_line("# @internal")
    assert not is_resync_line("# @unknown")
    assert not is_resync_line("f() {")
