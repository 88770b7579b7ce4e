# topmark:header:start
#
#   project      : shdoc
#   file         : test_block_accumulator.py
#   file_relpath : tests/parser/test_block_accumulator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block accumulator and tag payload parsing."""

from __future__ import annotations

from shdoc.document.model import ArgumentEntry, DescriptionText, SourceLocation, VariableRef
from shdoc.parser.block import BlockAccumulator, parse_argument, parse_variable
from tests.conftest import mark_parser, parametrize

LOC = SourceLocation("test.sh", 3)


@mark_parser
@parametrize(
    "raw, expected",
    [
        ("x    Input value", ArgumentEntry("x", "", "Input value")),
        ("$1 {string} Path to the file", ArgumentEntry("$1", "string", "Path to the file")),
        ("count {int}", ArgumentEntry("count", "int", "")),
        ("flag", ArgumentEntry("flag", "", "")),
        ("name {unterminated desc", ArgumentEntry("name", "", "{unterminated desc")),
        ("", None),
        ("   ", None),
        ("{string} missing name", None),
    ],
)
def test_parse_argument(raw: str, expected: ArgumentEntry | None) -> None:
    assert parse_argument(raw) == expected


@mark_parser
def test_parse_variable() -> None:
    assert parse_variable("HOME  user home") == VariableRef("HOME", "user home")
    assert parse_variable("PATH") == VariableRef("PATH", "")
    assert parse_variable("") is None


@mark_parser
def test_section_is_last_write_wins() -> None:
    block = BlockAccumulator()
    block.set_section("First", LOC)
    block.set_section("Second", SourceLocation("test.sh", 4))
    section = block.build_section()
    assert section.title == "Second"
    assert section.location.line == 4


@mark_parser
def test_variable_names_are_unique_within_block() -> None:
    block = BlockAccumulator()
    block.add_env(VariableRef("HOME", "first"))
    block.add_env(VariableRef("HOME", "second"))
    block.add_set(VariableRef("OUT"))
    assert block.env_vars == [VariableRef("HOME", "first")]
    assert block.set_vars == [VariableRef("OUT")]


@mark_parser
def test_build_function_keeps_argument_order() -> None:
    block = BlockAccumulator()
    for name in ("b", "a", "c"):
        block.arguments.append(ArgumentEntry(name))
    entry = block.build_function("f", LOC)
    assert [a.name for a in entry.arguments] == ["b", "a", "c"]
    assert entry.location == LOC
    assert not entry.description


@mark_parser
def test_build_section_without_description() -> None:
    block = BlockAccumulator()
    block.set_section("Utils", LOC)
    block.description = DescriptionText(["About."])
    assert block.build_section().description.text == "About."
    assert not block.build_section(with_description=False).description


@mark_parser
def test_emptiness_and_reset() -> None:
    block = BlockAccumulator()
    assert block.is_empty()
    block.type_pending = True
    assert not block.is_empty()
    assert not block.has_function_content()
    block.noargs = True
    assert block.has_function_content()
    block.reset()
    assert block.is_empty()
