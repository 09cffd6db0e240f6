# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : clean_config.py
#   file_relpath : src/clippy_lint_tester/cli/commands/clean_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`clean-config` command.

Rewrites ``Cargo.toml`` so the crate builds outside its workspace and
disables any Clippy configuration file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from clippy_lint_tester.cli.console import get_console
from clippy_lint_tester.cli.errors import ConfigError, IOCliError
from clippy_lint_tester.constants import CARGO_MANIFEST_NAME
from clippy_lint_tester.workspace.errors import ManifestError, WorkspaceError
from clippy_lint_tester.workspace.manifest import clean_cargo_manifest, disable_clippy_config

if TYPE_CHECKING:
    from clippy_lint_tester.cli.console import ConsoleLike


@click.command(
    name="clean-config",
    help="Drop path dependencies and [workspace] from Cargo.toml; disable clippy.toml.",
)
@click.argument(
    "crate_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.pass_context
def clean_config_command(ctx: click.Context, crate_dir: Path) -> None:
    """Prepare the manifest and Clippy config of CRATE_DIR for testing."""
    console: ConsoleLike = get_console(ctx)
    vlevel = int(ctx.obj.get("verbosity_level", 0))

    manifest = crate_dir / CARGO_MANIFEST_NAME
    try:
        rewritten = clean_cargo_manifest(manifest)
    except ManifestError as exc:
        raise ConfigError(str(exc)) from exc
    try:
        renamed = disable_clippy_config(crate_dir)
    except WorkspaceError as exc:
        raise IOCliError(str(exc)) from exc

    if vlevel < 0:
        return
    if rewritten:
        console.print(console.styled(f"rewrote {manifest}", fg="green"))
    elif vlevel > 0:
        console.print(f"unchanged {manifest}")
    for config_path in renamed:
        console.print(console.styled(f"disabled {config_path}", fg="green"))
