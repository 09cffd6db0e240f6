# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : markdown.py
#   file_relpath : src/clippy_lint_tester/utils/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown table rendering for CLI reports."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[object]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
      headers: Column headers.
      rows: A sequence of row sequences (each row same length as ``headers``).
      align: Optional mapping of column index to alignment: ``"left"`` (default),
        ``"right"``, or ``"center"``.

    Returns:
      The Markdown table as a single string (ending with a newline).

    Raises:
      ValueError: If a row does not have as many cells as there are headers.
    """
    if not headers:
        return ""
    ncols = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    cells = [[str(c) for c in r] for r in rows]
    widths = [len(h) for h in headers]
    for r in cells:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _style(i: int) -> str:
        return (align or {}).get(i, "left").lower()

    def _pad(text: str, i: int) -> str:
        if _style(i) == "right":
            return f"{text:>{widths[i]}}"
        if _style(i) == "center":
            return f"{text:^{widths[i]}}"
        return f"{text:<{widths[i]}}"

    def _sep(i: int) -> str:
        w = max(1, widths[i])
        if _style(i) == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        if _style(i) == "center":
            return ":" + ("-" * (w - 2) if w > 2 else "-") + ":"
        return "-" * w

    def _row(values: Sequence[str]) -> str:
        return "| " + " | ".join(_pad(v, i) for i, v in enumerate(values)) + " |"

    lines = [_row(list(headers)), "| " + " | ".join(_sep(i) for i in range(ncols)) + " |"]
    lines.extend(_row(r) for r in cells)
    return "\n".join(lines) + "\n"
