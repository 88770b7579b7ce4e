# topmark:header:start
#
#   project      : shdoc
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI `render` command: output routing, formats and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from shdoc.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

MYFUNC: str = (
    "# myfunc()\n"
    "# @description\n"
    "#  Computes something.\n"
    "# @arg   x    Input value\n"
    "function myfunc(x) { ... }\n"
)


@mark_cli
def test_render_file_to_stdout(tmp_path: Path) -> None:
    (tmp_path / "lib.sh").write_text(MYFUNC, "utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "render", "lib.sh"])

    assert_SUCCESS(result)
    assert result.stdout.startswith("## Index\n\n* [myfunc](#myfunc)\n")
    assert "### myfunc\n\nComputes something.\n" in result.stdout
    assert result.stderr == ""


@mark_cli
def test_render_stdin() -> None:
    result: Result = run_cli(["render"], input_text=MYFUNC)

    assert_SUCCESS(result)
    assert "### myfunc" in result.stdout


@mark_cli
def test_render_json(tmp_path: Path) -> None:
    (tmp_path / "lib.sh").write_text(MYFUNC, "utf-8")

    result: Result = run_cli_in(tmp_path, ["render", "--format", "json", "lib.sh"])

    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    (entry,) = data["entries"]
    assert entry["name"] == "myfunc"
    assert entry["file"] == "lib.sh"
    assert entry["arguments"] == [{"name": "x", "type": "", "description": "Input value"}]


@mark_cli
def test_render_to_output_file(tmp_path: Path) -> None:
    (tmp_path / "lib.sh").write_text(MYFUNC, "utf-8")

    result: Result = run_cli_in(tmp_path, ["render", "-o", "API.md", "lib.sh"])

    assert_SUCCESS(result)
    assert result.stdout == ""
    assert (tmp_path / "API.md").read_text("utf-8").startswith("## Index\n")


@mark_cli
def test_render_multiple_files_share_cross_references(tmp_path: Path) -> None:
    (tmp_path / "a.sh").write_text("# @description a\n# @env HOME\na() {\n", "utf-8")
    (tmp_path / "b.sh").write_text("# @description b\n# @env HOME\nb() {\n", "utf-8")

    result: Result = run_cli_in(tmp_path, ["render", "a.sh", "b.sh"])

    assert_SUCCESS(result)
    assert "* **HOME**: [a](#a), [b](#b)\n" in result.stdout

    no_xref: Result = run_cli_in(tmp_path, ["render", "--no-xref", "a.sh", "b.sh"])
    assert "Variables referenced" not in no_xref.stdout


@mark_cli
def test_empty_section_title_fails_without_output(tmp_path: Path) -> None:
    (tmp_path / "lib.sh").write_text("# @section\n" + MYFUNC, "utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "render", "lib.sh"])

    assert_FAILURE(result)
    assert result.stdout == ""
    assert "[ERROR] @section requires a title\n    line: 1\n    file: lib.sh" in result.stderr


@mark_cli
def test_failure_does_not_write_output_file(tmp_path: Path) -> None:
    (tmp_path / "lib.sh").write_text("# @description d\n# @noargs\n# @arg x\nf() {\n", "utf-8")

    result: Result = run_cli_in(tmp_path, ["render", "-o", "API.md", "lib.sh"])

    assert_FAILURE(result)
    assert "mutually exclusive" in result.stderr
    assert not (tmp_path / "API.md").exists()


@mark_cli
def test_advisories_go_to_stderr(tmp_path: Path) -> None:
    (tmp_path / "lib.sh").write_text("# @description d\n# @example x\nf() {\n", "utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "render", "lib.sh"])

    assert_SUCCESS(result)
    assert "[WARNING] Unknown tag @example\n    line: 2\n    file: lib.sh" in result.stderr
    assert "WARNING" not in result.stdout


@mark_cli
def test_missing_file(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["render", "nope.sh"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "No such file: nope.sh" in result.stderr


@mark_cli
def test_directory_input(tmp_path: Path) -> None:
    (tmp_path / "dir").mkdir()

    result: Result = run_cli_in(tmp_path, ["render", "dir"])

    assert result.exit_code == ExitCode.IO_ERROR


@mark_cli
def test_invalid_utf8(tmp_path: Path) -> None:
    (tmp_path / "bad.sh").write_bytes(b"# @description \xff\xfe\n")

    result: Result = run_cli_in(tmp_path, ["render", "bad.sh"])

    assert result.exit_code == ExitCode.ENCODING_ERROR


@mark_cli
def test_invalid_format_is_usage_error() -> None:
    result: Result = run_cli(["render", "--format", "html"], input_text="")

    assert result.exit_code == 2
    assert "Must be one of: markdown, json" in result.stderr


@mark_cli
def test_stdin_given_twice_is_usage_error() -> None:
    result: Result = run_cli(["render", "-", "-"], input_text="")

    assert result.exit_code == ExitCode.USAGE_ERROR
