# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : editor.py
#   file_relpath : src/clippy_lint_tester/cleaning/editor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Splice comment markers around matched attributes.

Spans carry character columns while the splice happens on UTF-8 bytes, so
every insertion point is converted with `char_column_to_byte_offset`. Each
line is scanned once, left to right; offsets are computed incrementally
against the part of the line not consumed by earlier insertions.

The text is split on ``"\\n"`` only. Carriage returns, a missing or present
final newline, and every other character are reproduced unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from clippy_lint_tester.config.logging import get_logger
from clippy_lint_tester.constants import COMMENT_END_MARKER, COMMENT_START_MARKER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from clippy_lint_tester.cleaning.spans import MatchSpan, SourcePosition
    from clippy_lint_tester.config.logging import ClippyLintTesterLogger

logger: ClippyLintTesterLogger = get_logger(__name__)


class InsertKind(Enum):
    """Which marker an insertion point receives."""

    COMMENT_START = COMMENT_START_MARKER
    COMMENT_END = COMMENT_END_MARKER


def char_column_to_byte_offset(line: str, column: int) -> int:
    """Return the UTF-8 byte offset of character ``column`` in ``line``.

    Columns past the end of the line map to the line's byte length.

    Args:
        line (str): The line text (without its newline).
        column (int): A 0-based character column.

    Returns:
        int: The byte offset at which that character starts.
    """
    offset = 0
    for ch in line[: max(column, 0)]:
        offset += len(ch.encode("utf-8"))
    return offset


def insert_comments(source: str, spans: Sequence[MatchSpan]) -> str:
    """Wrap each span of ``source`` in comment markers.

    Args:
        source (str): The original source text.
        spans (Sequence[MatchSpan]): Spans in increasing source order, not overlapping.

    Returns:
        str: The edited text, with the same number of lines as ``source``.
    """
    inserts: list[tuple[InsertKind, SourcePosition]] = []
    for span in spans:
        inserts.append((InsertKind.COMMENT_START, span.start))
        inserts.append((InsertKind.COMMENT_END, span.end))

    out: list[str] = []
    pending = 0
    for num, line in enumerate(source.split("\n"), start=1):
        if pending >= len(inserts) or inserts[pending][1].line != num:
            out.append(line)
            continue

        encoded = line.encode("utf-8")
        pieces: list[bytes] = []
        consumed_chars = 0
        consumed_bytes = 0
        while pending < len(inserts) and inserts[pending][1].line == num:
            kind, pos = inserts[pending]
            step = char_column_to_byte_offset(line[consumed_chars:], pos.column - consumed_chars)
            pieces.append(encoded[consumed_bytes : consumed_bytes + step])
            pieces.append(kind.value.encode("utf-8"))
            consumed_bytes += step
            consumed_chars = max(consumed_chars, pos.column)
            pending += 1
        pieces.append(encoded[consumed_bytes:])
        out.append(b"".join(pieces).decode("utf-8"))

    if pending < len(inserts):
        logger.warning("%d insertion point(s) beyond the end of the source", len(inserts) - pending)

    return "\n".join(out)
