# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : test_clean_source.py
#   file_relpath : tests/cleaning/test_clean_source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for `clean_source` and `clean`.

Each case feeds a complete Rust file through parse -> locate -> edit and
compares the result byte for byte.
"""

from __future__ import annotations

import pytest

from clippy_lint_tester.cleaning import (
    Changed,
    ParseError,
    ParseFailed,
    Unchanged,
    clean,
    clean_source,
)
from tests.conftest import parametrize

M = "/* cleaned by clippy_lint_tester "
E = " */"


def test_inner_allow() -> None:
    result = clean_source("#![allow(clippy::approx_constant)]\n")
    assert result == f"{M}#![allow(clippy::approx_constant)]{E}\n"


def test_inner_allow_multiline_file() -> None:
    source = "// Start comment\n\n#![allow(clippy::approx_constant)]\n\nfn f() { }\n\n"
    expected = (
        f"// Start comment\n\n{M}#![allow(clippy::approx_constant)]{E}\n\nfn f() {{ }}\n\n"
    )
    assert clean_source(source) == expected


def test_inner_allow_multiline_attr() -> None:
    source = (
        "// Start comment\n"
        "\n"
        "#![allow(\n"
        "    clippy::approx_constant,\n"
        "    clippy::bad_bit_mask,\n"
        ")]\n"
        "\n"
        "fn f() { }\n"
    )
    expected = (
        "// Start comment\n"
        "\n"
        f"{M}#![allow(\n"
        "    clippy::approx_constant,\n"
        "    clippy::bad_bit_mask,\n"
        f")]{E}\n"
        "\n"
        "fn f() { }\n"
    )
    assert clean_source(source) == expected


def test_cfg_attr_feature() -> None:
    attr = '#![cfg_attr(feature = "any-feature", deny(clippy, clippy_pedantic))]'
    assert clean_source(attr + "\n") == f"{M}{attr}{E}\n"


def test_cfg_attr() -> None:
    attr = "#![cfg_attr(any_cfg, deny(clippy::all, clippy::pedantic))]"
    assert clean_source(attr + "\n") == f"{M}{attr}{E}\n"


def test_nested_cfg_attr() -> None:
    attr = "#[cfg_attr(unix, cfg_attr(test, warn(missing_docs)))]"
    assert clean_source(f"{attr}\nfn f() {{}}\n") == f"{M}{attr}{E}\nfn f() {{}}\n"


@parametrize(
    "source",
    [
        '#![cfg_attr(not(target_pointer_width = "64"), path = "soft/fixslice32.rs")]\n',
        "#![cfg_attr(test, allow(dead_code), allow(unused))]\n",
        "#[cfg_attr(test, derive(Debug))]\nstruct S;\n",
        "#![cfg_attr]\n",
    ],
)
def test_cfg_attr_not_lint_setting(source: str) -> None:
    assert clean_source(source) is None
    assert clean(source) == Unchanged()


def test_attribute_on_tuple_field() -> None:
    source = "pub struct S(#[allow(clippy::vec_box)] RefCell<Vec<Box<u32>>>);\n"
    expected = (
        f"pub struct S({M}#[allow(clippy::vec_box)]{E} RefCell<Vec<Box<u32>>>);\n"
    )
    assert clean_source(source) == expected


def test_clippy_msrv_attribute() -> None:
    source = '#![feature(custom_inner_attributes)]\n#![clippy::msrv = "1.30.0"]\n'
    expected = (
        '#![feature(custom_inner_attributes)]\n'
        f'{M}#![clippy::msrv = "1.30.0"]{E}\n'
    )
    assert clean_source(source) == expected


def test_two_attributes_on_one_line() -> None:
    source = "#[allow(a)] #[deny(b)] fn f() {}\n"
    expected = f"{M}#[allow(a)]{E} {M}#[deny(b)]{E} fn f() {{}}\n"
    assert clean_source(source) == expected


def test_multibyte_characters_before_attribute() -> None:
    source = 'const S: &str = "héllo"; #[allow(dead_code)] fn f() {}\n'
    expected = f'const S: &str = "héllo"; {M}#[allow(dead_code)]{E} fn f() {{}}\n'
    assert clean_source(source) == expected


def test_crlf_line_endings_are_preserved() -> None:
    source = "#![allow(unused)]\r\nfn f() {}\r\n"
    assert clean_source(source) == f"{M}#![allow(unused)]{E}\r\nfn f() {{}}\r\n"


def test_missing_final_newline_is_preserved() -> None:
    assert clean_source("#![warn(missing_docs)]") == f"{M}#![warn(missing_docs)]{E}"


@parametrize(
    "source",
    [
        "#[inline]\nfn f() {}\n",
        "#[derive(Debug, Clone)]\nstruct S;\n",
        "#[lint::allow(x)]\nfn f() {}\n",
        "#![msrv = \"1.0\"]\n",
        "// #[allow(x)]\nfn f() {}\n",
        'const S: &str = "#[allow(x)]";\n',
    ],
)
def test_non_directives_are_left_alone(source: str) -> None:
    assert clean_source(source) is None


def test_directive_matches_on_path_alone() -> None:
    assert clean_source("#[allow]\nfn f() {}\n") == f"{M}#[allow]{E}\nfn f() {{}}\n"


def test_attributes_inside_macro_bodies_are_not_visited() -> None:
    source = "macro_rules! m { () => { #[allow(x)] fn g() {} }; }\n"
    assert clean_source(source) is None


def test_cleaned_output_is_idempotent() -> None:
    source = "#![deny(warnings)]\n#[allow(dead_code)]\nfn f() {}\n"
    outcome = clean(source)
    assert isinstance(outcome, Changed)
    assert clean(outcome.text) == Unchanged()


def test_syntax_error_position() -> None:
    with pytest.raises(ParseError) as excinfo:
        clean_source("fn main() {}\n}\n")
    assert (excinfo.value.line, excinfo.value.column) == (2, 0)
    assert excinfo.value.message


def test_attribute_on_closure_parameter() -> None:
    source = "fn f() { let c = |#[allow(unused)] a: u8| 0; }\n"
    assert clean(source) == Changed(f"fn f() {{ let c = |{M}#[allow(unused)]{E} a: u8| 0; }}\n")


def test_missing_expression_is_reported_at_following_token() -> None:
    outcome = clean("fn main() { let x = ; }\n")
    assert isinstance(outcome, ParseFailed)
    assert (outcome.line, outcome.column) == (1, 20)
    assert outcome.message.startswith("unexpected `;`")


def test_unclosed_brace_is_reported_at_end_of_input() -> None:
    outcome = clean("fn ok() {}\nfn main() {\n")
    assert isinstance(outcome, ParseFailed)
    assert (outcome.line, outcome.column) == (3, 0)
    assert outcome.message == "unexpected end of input"


def test_clean_reports_parse_failure_as_value() -> None:
    outcome = clean("fn main() {}\n}\n")
    assert isinstance(outcome, ParseFailed)
    assert (outcome.line, outcome.column) == (2, 0)
    assert str(ParseError(outcome.line, outcome.column, outcome.message)).startswith("2:0: ")


def test_empty_source_is_unchanged() -> None:
    assert clean("") == Unchanged()
