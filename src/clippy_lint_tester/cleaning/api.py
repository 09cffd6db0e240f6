# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : api.py
#   file_relpath : src/clippy_lint_tester/cleaning/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points of the attribute cleaner.

The cleaner runs a straight pipeline on in-memory text:

    parse -> locate -> edit

`clean_source` raises `ParseError` and returns None when nothing matched.
`clean` wraps the same pipeline into a tagged outcome, which is what batch
callers want: a parse failure is a value to record, not an exception to
unwind through the loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from clippy_lint_tester.cleaning.editor import insert_comments
from clippy_lint_tester.cleaning.errors import ParseError
from clippy_lint_tester.cleaning.locator import locate_lint_attributes
from clippy_lint_tester.cleaning.parser import parse_rust
from clippy_lint_tester.cleaning.spans import MatchSpan
from clippy_lint_tester.config.logging import ClippyLintTesterLogger, get_logger

logger: ClippyLintTesterLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Unchanged:
    """No lint-control attribute was found; the source must not be rewritten."""


@dataclass(frozen=True, slots=True)
class Changed:
    """At least one attribute was neutralized."""

    text: str


@dataclass(frozen=True, slots=True)
class ParseFailed:
    """The source could not be parsed; nothing was edited."""

    line: int
    column: int
    message: str

    @classmethod
    def from_error(cls, err: ParseError) -> ParseFailed:
        return cls(line=err.line, column=err.column, message=err.message)


CleanOutcome: TypeAlias = Unchanged | Changed | ParseFailed


def find_lint_attributes(source: str) -> list[MatchSpan]:
    """Return the spans of all lint-control attributes in ``source``.

    Raises:
        ParseError: If ``source`` is not valid Rust.
    """
    return locate_lint_attributes(parse_rust(source))


def clean_source(source: str) -> str | None:
    """Comment out every lint-control attribute in ``source``.

    Args:
        source (str): The text of one Rust source file.

    Returns:
        str | None: The cleaned text, or None if no attribute matched.

    Raises:
        ParseError: If ``source`` is not valid Rust.
    """
    spans = find_lint_attributes(source)
    if not spans:
        return None
    logger.debug("Neutralizing %d attribute(s)", len(spans))
    return insert_comments(source, spans)


def clean(source: str) -> CleanOutcome:
    """Comment out every lint-control attribute in ``source``.

    Args:
        source (str): The text of one Rust source file.

    Returns:
        CleanOutcome: `Unchanged`, `Changed` with the new text, or
        `ParseFailed` with the position of the first syntax error.
    """
    try:
        cleaned = clean_source(source)
    except ParseError as err:
        return ParseFailed.from_error(err)
    if cleaned is None:
        return Unchanged()
    return Changed(text=cleaned)
