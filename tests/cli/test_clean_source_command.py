# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : test_clean_source_command.py
#   file_relpath : tests/cli/test_clean_source_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `clean-source`: per-file output, check mode, diffs and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import click
from click.testing import CliRunner

from clippy_lint_tester.cli.exit_codes import ExitCode
from clippy_lint_tester.cli.main import cli as _cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

# Type hint for the CLI command object
cli = cast(click.Command, _cli)

DIRTY = "#![allow(clippy::all)]\nfn f() {}\n"


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@mark_cli
def test_clean_source_rewrites_file(tmp_path: Path) -> None:
    f = _write(tmp_path / "lib.rs", DIRTY)

    result = CliRunner().invoke(cli, ["clean-source", str(f)])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert f"cleaned {f}" in result.stdout
    assert f.read_text(encoding="utf-8").startswith("/* cleaned by clippy_lint_tester #![allow")
    assert (tmp_path / "lib.rs.orig").read_text(encoding="utf-8") == DIRTY


@mark_cli
def test_check_mode_exits_would_change_without_writing(tmp_path: Path) -> None:
    f = _write(tmp_path / "src" / "lib.rs", DIRTY)

    result = CliRunner().invoke(cli, ["clean-source", "--check", str(tmp_path)])

    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "would clean" in result.stdout
    assert f.read_text(encoding="utf-8") == DIRTY
    assert not (tmp_path / "src" / "lib.rs.orig").exists()


@mark_cli
def test_check_mode_on_clean_tree_succeeds(tmp_path: Path) -> None:
    _write(tmp_path / "lib.rs", "fn f() {}\n")

    result = CliRunner().invoke(cli, ["clean-source", "--check", str(tmp_path)])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.stdout == ""


@mark_cli
def test_diff_output_is_plain_without_color(tmp_path: Path) -> None:
    f = _write(tmp_path / "lib.rs", DIRTY)

    result = CliRunner().invoke(cli, ["--no-color", "clean-source", "--check", "--diff", str(f)])

    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "-#![allow(clippy::all)]\n" in result.stdout
    assert "+/* cleaned by clippy_lint_tester #![allow(clippy::all)] */\n" in result.stdout
    assert "\x1b[" not in result.stdout


@mark_cli
def test_parse_failures_are_tabulated_and_exit_parse_error(tmp_path: Path) -> None:
    _write(tmp_path / "a.rs", "fn main() {}\n}\n")
    good = _write(tmp_path / "b.rs", DIRTY)

    result = CliRunner().invoke(cli, ["--no-color", "clean-source", str(tmp_path)])

    assert result.exit_code == ExitCode.PARSE_ERROR
    assert "1 file(s) could not be parsed" in result.stderr
    assert "| File" in result.stderr
    assert "a.rs" in result.stderr
    # the other file was still processed
    assert (tmp_path / "b.rs.orig").exists()
    assert good.read_text(encoding="utf-8") != DIRTY


@mark_cli
def test_summary_counts(tmp_path: Path) -> None:
    _write(tmp_path / "a.rs", DIRTY)
    _write(tmp_path / "b.rs", DIRTY)
    _write(tmp_path / "c.rs", "fn f() {}\n")

    result = CliRunner().invoke(cli, ["clean-source", "--check", "--summary", str(tmp_path)])

    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "would clean: 2" in result.stdout
    assert "unchanged: 1" in result.stdout


@mark_cli
def test_quiet_suppresses_per_file_lines(tmp_path: Path) -> None:
    f = _write(tmp_path / "lib.rs", DIRTY)

    result = CliRunner().invoke(cli, ["-q", "clean-source", str(f)])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.stdout == ""


@mark_cli
def test_missing_path_exits_file_not_found(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["clean-source", str(tmp_path / "nope")])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "does not exist" in result.output


@mark_cli
def test_verbose_and_quiet_are_mutually_exclusive(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["-v", "-q", "clean-source", str(tmp_path)])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output
