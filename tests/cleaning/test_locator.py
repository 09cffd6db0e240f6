# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : test_locator.py
#   file_relpath : tests/cleaning/test_locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive matching, cfg_attr resolution and span location."""

from __future__ import annotations

from clippy_lint_tester.cleaning.api import find_lint_attributes
from clippy_lint_tester.cleaning.locator import DirectivePattern, resolve_cfg_attr
from clippy_lint_tester.cleaning.meta import Meta, parse_attribute
from clippy_lint_tester.cleaning.spans import MatchSpan, SourcePosition
from tests.conftest import parametrize


@parametrize(
    "text, expected",
    [
        ("#[allow(x)]", DirectivePattern.ALLOW),
        ("#[warn(x)]", DirectivePattern.WARN),
        ("#[deny(x)]", DirectivePattern.DENY),
        ('#![clippy::msrv = "1.30"]', DirectivePattern.MSRV),
        ("#[forbid(x)]", None),
        ("#[msrv]", None),
        ("#[clippy::allow(x)]", None),
    ],
)
def test_directive_pattern_match(text: str, expected: DirectivePattern | None) -> None:
    assert DirectivePattern.match(parse_attribute(text)) is expected


def test_resolve_cfg_attr_unwraps_layers() -> None:
    meta = parse_attribute("#[cfg_attr(a, cfg_attr(b, deny(x)))]")
    assert resolve_cfg_attr(meta) == Meta(path=("deny",), nested=(Meta(path=("x",)),))


@parametrize(
    "text",
    [
        "#[cfg_attr(a)]",
        "#[cfg_attr(a, deny(x), allow(y))]",
        '#[cfg_attr(a, "lit")]',
        "#[cfg_attr(a, cfg_attr(b))]",
    ],
)
def test_resolve_cfg_attr_rejects_other_arities(text: str) -> None:
    assert resolve_cfg_attr(parse_attribute(text)) is None


def test_resolve_cfg_attr_passes_through_plain_meta() -> None:
    meta = parse_attribute("#[inline]")
    assert resolve_cfg_attr(meta) is meta


def test_span_covers_whole_outer_attribute() -> None:
    source = "fn a() {}\n    #[cfg_attr(unix, allow(x))]\nfn b() {}\n"
    assert find_lint_attributes(source) == [
        MatchSpan(start=SourcePosition(2, 4), end=SourcePosition(2, 31)),
    ]


def test_multiline_span() -> None:
    source = "#![deny(\n    warnings,\n)]\n"
    assert find_lint_attributes(source) == [
        MatchSpan(start=SourcePosition(1, 0), end=SourcePosition(3, 2)),
    ]


def test_spans_are_in_source_order_and_use_character_columns() -> None:
    source = "fn f() {}\nstruct T(#[allow(a)] u8, /* ü */ #[warn(b)] u8);\n"
    assert find_lint_attributes(source) == [
        MatchSpan(start=SourcePosition(2, 9), end=SourcePosition(2, 20)),
        MatchSpan(start=SourcePosition(2, 33), end=SourcePosition(2, 43)),
    ]


def test_attributes_in_nested_items_are_found() -> None:
    source = (
        "mod m {\n"
        "    impl S {\n"
        "        #[allow(clippy::new_ret_no_self)]\n"
        "        fn new() {}\n"
        "    }\n"
        "}\n"
    )
    spans = find_lint_attributes(source)
    assert [s.start for s in spans] == [SourcePosition(3, 8)]


def test_statement_and_expression_attributes_are_found() -> None:
    source = (
        "fn f() {\n"
        "    #[allow(unused_variables)]\n"
        "    let x = 1;\n"
        "    match x {\n"
        "        #[allow(unreachable_patterns)]\n"
        "        _ => {}\n"
        "    }\n"
        "}\n"
    )
    assert [s.start.line for s in find_lint_attributes(source)] == [2, 5]
