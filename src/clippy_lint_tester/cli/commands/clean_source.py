# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : clean_source.py
#   file_relpath : src/clippy_lint_tester/cli/commands/clean_source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`clean-source` command.

Comments out lint-control attributes in a Rust file or in every ``*.rs`` file
below a directory. Changed files are backed up to ``<name>.rs.orig`` first.

Exit codes:
    * ``SUCCESS`` when every file parsed (and, with ``--check``, none would change).
    * ``WOULD_CHANGE`` with ``--check`` when at least one file would be cleaned.
    * ``PARSE_ERROR`` when at least one file could not be parsed.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING

import click

from clippy_lint_tester.cli.console import get_console
from clippy_lint_tester.cli.errors import FileNotFoundCliError, IOCliError
from clippy_lint_tester.cli.exit_codes import ExitCode
from clippy_lint_tester.config.logging import get_logger
from clippy_lint_tester.utils.diff import make_patch, render_patch
from clippy_lint_tester.utils.markdown import render_markdown_table
from clippy_lint_tester.workspace.errors import WorkspaceError
from clippy_lint_tester.workspace.sources import FileStatus, clean_attrs_tree

if TYPE_CHECKING:
    from clippy_lint_tester.cli.console import ConsoleLike
    from clippy_lint_tester.config.logging import ClippyLintTesterLogger
    from clippy_lint_tester.workspace.sources import FileCleanResult

logger: ClippyLintTesterLogger = get_logger(__name__)


def render_parse_failures(results: list[FileCleanResult]) -> str:
    """Return a Markdown table listing the files that failed to parse."""
    rows = [
        (str(r.path), r.error.line, r.error.column, r.error.message)
        for r in results
        if r.error is not None
    ]
    return render_markdown_table(
        ["File", "Line", "Column", "Error"],
        rows,
        align={1: "right", 2: "right"},
    )


def _file_message(r: FileCleanResult, console: ConsoleLike) -> str | None:
    match r.status:
        case FileStatus.CLEANED:
            return console.styled(f"cleaned {r.path}", fg="green")
        case FileStatus.WOULD_CLEAN:
            return console.styled(f"would clean {r.path}", fg="yellow")
        case FileStatus.SKIPPED:
            return console.styled(f"skipped {r.path} (not valid UTF-8)", fg="yellow")
        case _:
            return None


@click.command(
    name="clean-source",
    help="Comment out allow/warn/deny/clippy::msrv attributes in Rust sources.",
)
@click.argument(
    "path",
    type=click.Path(path_type=Path),
)
@click.option(
    "--check",
    is_flag=True,
    help="Report files that would change without writing them (exit 2 if any).",
)
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    help="Show a unified diff for each changed file.",
)
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Print per-status counts instead of per-file lines.",
)
@click.pass_context
def clean_source_command(
    ctx: click.Context,
    path: Path,
    *,
    check: bool,
    show_diff: bool,
    summary_mode: bool,
) -> None:
    """Clean lint-control attributes below PATH.

    Args:
        ctx (click.Context): Click context holding the console and verbosity level.
        path (Path): A Rust source file or a directory.
        check (bool): Dry run; exit with ``WOULD_CHANGE`` if anything would be cleaned.
        show_diff (bool): Print colorized unified diffs of the changes.
        summary_mode (bool): Print status counts instead of per-file lines.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))
    color: bool = bool(ctx.obj.get("color_enabled", False))

    if not path.exists():
        raise FileNotFoundCliError(f"Path does not exist: {path}")

    try:
        results = clean_attrs_tree(path, dry_run=check)
    except WorkspaceError as exc:
        raise IOCliError(str(exc)) from exc
    logger.debug("Processed %d file(s) below %s", len(results), path)

    if summary_mode:
        counts = Counter(r.status for r in results)
        for status in FileStatus:
            if counts[status]:
                console.print(f"{status.value:>12}: {counts[status]}")
    elif vlevel >= 0:
        for r in results:
            msg = _file_message(r, console)
            if msg is not None:
                console.print(msg)
            elif vlevel > 0 and r.status is FileStatus.UNCHANGED:
                console.print(f"unchanged {r.path}")

    if show_diff:
        for r in results:
            if r.changed and r.original is not None and r.cleaned is not None:
                patch = make_patch(r.original, r.cleaned, path=str(r.path))
                console.print(render_patch(patch) if color else patch, nl=False)

    failures = [r for r in results if r.status is FileStatus.PARSE_FAILED]
    if failures:
        console.error(f"{len(failures)} file(s) could not be parsed:")
        console.error(render_parse_failures(failures), nl=False)
        ctx.exit(ExitCode.PARSE_ERROR)

    if check and any(r.changed for r in results):
        ctx.exit(ExitCode.WOULD_CHANGE)
