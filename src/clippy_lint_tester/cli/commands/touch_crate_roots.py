# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : touch_crate_roots.py
#   file_relpath : src/clippy_lint_tester/cli/commands/touch_crate_roots.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`touch-crate-roots` command.

Bumps the modification time of every crate root so ``cargo clippy``
re-checks the crate instead of reusing cached results.
"""

from __future__ import annotations

from pathlib import Path

import click

from clippy_lint_tester.cli.console import get_console
from clippy_lint_tester.cli.errors import ConfigError
from clippy_lint_tester.workspace.errors import ManifestError
from clippy_lint_tester.workspace.manifest import touch_crate_roots


@click.command(
    name="touch-crate-roots",
    help="Update the mtime of the lib and bin roots of a crate.",
)
@click.argument(
    "crate_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.pass_context
def touch_crate_roots_command(ctx: click.Context, crate_dir: Path) -> None:
    """Touch the crate roots declared in CRATE_DIR/Cargo.toml."""
    console = get_console(ctx)
    try:
        touched = touch_crate_roots(crate_dir)
    except ManifestError as exc:
        raise ConfigError(str(exc)) from exc

    if int(ctx.obj.get("verbosity_level", 0)) > 0:
        for root_path in touched:
            console.print(f"touched {root_path}")
