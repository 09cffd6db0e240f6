# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : test_crate_commands.py
#   file_relpath : tests/cli/test_crate_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `clean-config`, `touch-crate-roots`, help and version output."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import click
from click.testing import CliRunner

from clippy_lint_tester.cli.exit_codes import ExitCode
from clippy_lint_tester.cli.main import cli as _cli
from clippy_lint_tester.constants import TOOL_VERSION
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

cli = cast(click.Command, _cli)


@mark_cli
def test_clean_config(crate_dir: Path) -> None:
    (crate_dir / ".clippy.toml").write_text("", encoding="utf-8")

    result = CliRunner().invoke(cli, ["clean-config", str(crate_dir)])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "rewrote" in result.stdout
    assert "disabled" in result.stdout
    assert (crate_dir / "Cargo.toml.bak").exists()
    assert (crate_dir / ".clippy.toml.bak").exists()


@mark_cli
def test_clean_config_without_manifest_exits_config_error(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["clean-config", str(tmp_path)])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Cargo.toml" in result.output


@mark_cli
def test_touch_crate_roots_verbose(crate_dir: Path) -> None:
    result = CliRunner().invoke(cli, ["-v", "touch-crate-roots", str(crate_dir)])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert f"touched {crate_dir / 'src' / 'lib.rs'}" in result.stdout


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result = CliRunner().invoke(cli, [])

    assert result.exit_code == ExitCode.SUCCESS
    assert "clean-source" in result.stdout
    assert "Usage:" in result.stdout


@mark_cli
def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == ExitCode.SUCCESS
    assert TOOL_VERSION in result.stdout
