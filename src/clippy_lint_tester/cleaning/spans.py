# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : spans.py
#   file_relpath : src/clippy_lint_tester/cleaning/spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source positions and spans for matched attributes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class SourcePosition:
    """A position in source text.

    ``line`` is 1-based. ``column`` is 0-based and counts characters (code
    points), not bytes.
    """

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """Half-open span [start, end) covering one matched attribute."""

    start: SourcePosition
    end: SourcePosition
