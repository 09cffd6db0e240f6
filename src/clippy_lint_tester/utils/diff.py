# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : diff.py
#   file_relpath : src/clippy_lint_tester/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between original and cleaned sources, with colored rendering."""

from __future__ import annotations

import difflib
from collections.abc import Sequence

from yachalk import chalk


def make_patch(original: str, updated: str, *, path: str) -> str:
    """Return a unified diff of ``original`` against ``updated``.

    Lines keep their own endings so CRLF sources diff faithfully.
    """
    return "".join(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (original)",
            tofile=f"{path} (cleaned)",
            n=3,
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as either a sequence of lines or a single string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
