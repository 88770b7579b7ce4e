# topmark:header:start
#
#   project      : shdoc
#   file         : test_diagnostic_log.py
#   file_relpath : tests/diagnostic/test_diagnostic_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic log and formatting."""

from __future__ import annotations

from shdoc.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    format_diagnostic,
)
from shdoc.document.model import SourceLocation


def test_log_keeps_insertion_order() -> None:
    log = DiagnosticLog()
    w1 = log.add_warning("w1")
    e1 = log.add_error("e1", SourceLocation("lib.sh", 2))
    log.add(Diagnostic(DiagnosticLevel.ERROR, "e2"))

    assert [d.message for d in log] == ["w1", "e1", "e2"]
    assert w1.level == DiagnosticLevel.WARNING
    assert e1.location == SourceLocation("lib.sh", 2)
    assert [d.message for d in log.errors()] == ["e1", "e2"]


def test_format_with_location() -> None:
    diagnostic = Diagnostic(
        DiagnosticLevel.ERROR,
        "@section requires a title",
        SourceLocation("lib/util.sh", 3),
    )
    assert format_diagnostic(diagnostic) == (
        "[ERROR] @section requires a title\n    line: 3\n    file: lib/util.sh"
    )


def test_format_without_location() -> None:
    assert format_diagnostic(Diagnostic(DiagnosticLevel.WARNING, "note")) == "[WARNING] note"
