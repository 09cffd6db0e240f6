# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : test_editor.py
#   file_relpath : tests/cleaning/test_editor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker insertion and character/byte column conversion."""

from __future__ import annotations

from clippy_lint_tester.cleaning.editor import char_column_to_byte_offset, insert_comments
from clippy_lint_tester.cleaning.spans import MatchSpan, SourcePosition
from tests.conftest import parametrize

M = "/* cleaned by clippy_lint_tester "
E = " */"


def _span(sl: int, sc: int, el: int, ec: int) -> MatchSpan:
    return MatchSpan(start=SourcePosition(sl, sc), end=SourcePosition(el, ec))


@parametrize(
    "line, column, expected",
    [
        ("abc", 0, 0),
        ("abc", 2, 2),
        ("héllo", 2, 3),
        ("日本語x", 3, 9),
        ("a🦀b", 2, 5),
        ("abc", 10, 3),
        ("", 0, 0),
    ],
)
def test_char_column_to_byte_offset(line: str, column: int, expected: int) -> None:
    assert char_column_to_byte_offset(line, column) == expected


def test_no_spans_returns_source_unchanged() -> None:
    source = "a\r\nb\n\nc"
    assert insert_comments(source, []) == source


def test_single_line_span() -> None:
    assert insert_comments("xx#[a]yy\n", [_span(1, 2, 1, 6)]) == f"xx{M}#[a]{E}yy\n"


def test_span_across_lines() -> None:
    source = "#[a(\n  b,\n)]\nfn f() {}"
    expected = f"{M}#[a(\n  b,\n)]{E}\nfn f() {{}}"
    assert insert_comments(source, [_span(1, 0, 3, 2)]) == expected


def test_several_spans_on_one_line_with_multibyte_text() -> None:
    source = "é#[a] ü #[b]ß\n"
    spans = [_span(1, 1, 1, 5), _span(1, 8, 1, 12)]
    assert insert_comments(source, spans) == f"é{M}#[a]{E} ü {M}#[b]{E}ß\n"


def test_line_count_is_preserved() -> None:
    source = "#[a]\r\n#[b]\r\n"
    result = insert_comments(source, [_span(1, 0, 1, 4), _span(2, 0, 2, 4)])
    assert result == f"{M}#[a]{E}\r\n{M}#[b]{E}\r\n"
    assert result.count("\n") == source.count("\n")


def test_insertion_point_at_end_of_line() -> None:
    assert insert_comments("#[a]", [_span(1, 0, 1, 4)]) == f"{M}#[a]{E}"
