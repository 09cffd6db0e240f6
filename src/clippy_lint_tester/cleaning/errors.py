# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : errors.py
#   file_relpath : src/clippy_lint_tester/cleaning/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the attribute cleaner."""

from __future__ import annotations


class ParseError(Exception):
    """The source file is not syntactically valid Rust.

    Carries the position of the first syntax error: a 1-based ``line`` and a
    0-based character ``column``. No edit is ever produced alongside it.
    """

    def __init__(self, line: int, column: int, message: str) -> None:
        super().__init__(line, column, message)
        self.line = line
        self.column = column
        self.message = message

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"


class MetaSyntaxError(ValueError):
    """An attribute's content does not form a structured meta item."""
