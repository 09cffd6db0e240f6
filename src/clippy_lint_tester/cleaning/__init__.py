# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : __init__.py
#   file_relpath : src/clippy_lint_tester/cleaning/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute cleaner: neutralize lint-control attributes in Rust sources."""

from __future__ import annotations

from clippy_lint_tester.cleaning.api import (
    Changed,
    CleanOutcome,
    ParseFailed,
    Unchanged,
    clean,
    clean_source,
    find_lint_attributes,
)
from clippy_lint_tester.cleaning.editor import char_column_to_byte_offset, insert_comments
from clippy_lint_tester.cleaning.errors import ParseError
from clippy_lint_tester.cleaning.spans import MatchSpan, SourcePosition

__all__ = [
    "Changed",
    "CleanOutcome",
    "MatchSpan",
    "ParseError",
    "ParseFailed",
    "SourcePosition",
    "Unchanged",
    "char_column_to_byte_offset",
    "clean",
    "clean_source",
    "find_lint_attributes",
    "insert_comments",
]
