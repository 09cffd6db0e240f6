# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : meta.py
#   file_relpath : src/clippy_lint_tester/cleaning/meta.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured meta items parsed from Rust attribute text.

An attribute such as ``#![cfg_attr(feature = "x", deny(clippy::all))]`` is
parsed into a `Meta` tree: a path plus either a parenthesized list of nested
items, a ``= literal`` value, or nothing. Three shapes are accepted, as in
rustc's meta-item grammar:

- ``path``
- ``path(nested, nested, ...)`` where each nested item is a meta or a literal
- ``path = literal``

Anything else (bracket or brace delimiters, macro calls as values, stray
tokens) raises `MetaSyntaxError`. Callers treat that as "not a lint
directive", never as a file-level error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from clippy_lint_tester.cleaning.errors import MetaSyntaxError


class TokenKind(str, Enum):
    """Token kinds of the attribute lexer."""

    IDENT = "IDENT"
    LITERAL = "LITERAL"
    LIFETIME = "LIFETIME"
    PATH_SEP = "::"
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"
    COMMA = ","
    EQ = "="
    POUND = "#"
    BANG = "!"
    PUNCT = "PUNCT"
    EOF = "EOF"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    offset: int


@dataclass(frozen=True, slots=True)
class Lit:
    """A literal nested in a meta list or used as a ``name = value`` value."""

    text: str  # raw source text, not unescaped


@dataclass(frozen=True, slots=True)
class Meta:
    """A meta item: a path with optional nested arguments or a value."""

    path: tuple[str, ...]
    leading_colon: bool = False
    nested: tuple[Meta | Lit, ...] | None = None  # set for ``path(...)``
    value: Lit | None = None  # set for ``path = literal``

    def is_ident(self, name: str) -> bool:
        """Return True if the path is exactly the single identifier ``name``."""
        return not self.leading_colon and self.path == (name,)

    def is_path(self, segments: tuple[str, ...]) -> bool:
        """Return True if the path equals ``segments`` (without a leading ``::``)."""
        return not self.leading_colon and self.path == segments

    def __str__(self) -> str:
        head = ("::" if self.leading_colon else "") + "::".join(self.path)
        if self.nested is not None:
            return f"{head}({', '.join(str(n) for n in self.nested)})"
        if self.value is not None:
            return f"{head} = {self.value.text}"
        return head


_IDENT_RE = re.compile(r"(?:r#)?[^\W\d]\w*")
_NUMBER_RE = re.compile(r"[0-9][0-9_]*(?:\.[0-9][0-9_]*)?(?:[eE][+-]?[0-9_]+)?\w*")
_RAW_STRING_START_RE = re.compile(r"(?:br|cr|r)(#*)\"")
_CHAR_RE = re.compile(r"b?'(?:\\(?:x[0-9a-fA-F]{2}|u\{[0-9a-fA-F_]*\}|.)|[^\\'\n])'")
_LIFETIME_RE = re.compile(r"'(?:r#)?[^\W\d]\w*")

_SINGLE: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    "=": TokenKind.EQ,
    "#": TokenKind.POUND,
    "!": TokenKind.BANG,
}


@dataclass(slots=True)
class _Cursor:
    src: str
    i: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def startswith(self, prefix: str) -> bool:
        return self.src.startswith(prefix, self.i)


def _skip_block_comment(cur: _Cursor) -> None:
    # Rust block comments nest.
    start = cur.i
    depth = 0
    while not cur.eof():
        if cur.startswith("/*"):
            depth += 1
            cur.i += 2
        elif cur.startswith("*/"):
            depth -= 1
            cur.i += 2
            if depth == 0:
                return
        else:
            cur.i += 1
    raise MetaSyntaxError(f"unterminated block comment at offset {start}")


def _scan_quoted(cur: _Cursor, start: int) -> str:
    # cur.i points at the opening quote
    cur.i += 1
    while not cur.eof():
        c = cur.peek()
        if c == "\\":
            cur.i += 2
            continue
        cur.i += 1
        if c == '"':
            return cur.src[start : cur.i]
    raise MetaSyntaxError(f"unterminated string literal at offset {start}")


def tokenize(src: str) -> list[Token]:
    """Split attribute text into tokens, dropping whitespace and comments.

    Args:
        src (str): Attribute source text, e.g. ``#[allow(dead_code)]``.

    Returns:
        list[Token]: The tokens, terminated by an EOF token.

    Raises:
        MetaSyntaxError: On unterminated literals/comments.
    """
    cur = _Cursor(src=src)
    tokens: list[Token] = []

    while not cur.eof():
        ch = cur.peek()
        start = cur.i

        if ch.isspace():
            cur.i += 1
            continue

        if cur.startswith("//"):
            while not cur.eof() and cur.peek() != "\n":
                cur.i += 1
            continue

        if cur.startswith("/*"):
            _skip_block_comment(cur)
            continue

        m = _RAW_STRING_START_RE.match(src, cur.i)
        if m:
            closing = '"' + m.group(1)
            end = src.find(closing, m.end())
            if end < 0:
                raise MetaSyntaxError(f"unterminated raw string literal at offset {start}")
            cur.i = end + len(closing)
            tokens.append(Token(TokenKind.LITERAL, src[start : cur.i], start))
            continue

        if ch == '"' or (ch in "bc" and cur.peek(1) == '"'):
            if ch != '"':
                cur.i += 1
            tokens.append(Token(TokenKind.LITERAL, _scan_quoted(cur, start), start))
            continue

        if ch == "'" or (ch == "b" and cur.peek(1) == "'"):
            m = _CHAR_RE.match(src, cur.i)
            if m:
                cur.i = m.end()
                tokens.append(Token(TokenKind.LITERAL, m.group(0), start))
                continue
            m = _LIFETIME_RE.match(src, cur.i)
            if m:
                cur.i = m.end()
                tokens.append(Token(TokenKind.LIFETIME, m.group(0), start))
                continue
            raise MetaSyntaxError(f"invalid character literal at offset {start}")

        m = _NUMBER_RE.match(src, cur.i)
        if m:
            cur.i = m.end()
            tokens.append(Token(TokenKind.LITERAL, m.group(0), start))
            continue

        m = _IDENT_RE.match(src, cur.i)
        if m:
            cur.i = m.end()
            tokens.append(Token(TokenKind.IDENT, m.group(0), start))
            continue

        if cur.startswith("::"):
            cur.i += 2
            tokens.append(Token(TokenKind.PATH_SEP, "::", start))
            continue

        cur.i += 1
        tokens.append(Token(_SINGLE.get(ch, TokenKind.PUNCT), ch, start))

    tokens.append(Token(TokenKind.EOF, "", len(src)))
    return tokens


class _MetaParser:
    """Recursive-descent parser over attribute tokens."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.i = 0

    def peek(self, n: int = 0) -> Token:
        j = min(self.i + n, len(self.tokens) - 1)
        return self.tokens[j]

    def advance(self) -> Token:
        tok = self.tokens[self.i]
        if tok.kind is not TokenKind.EOF:
            self.i += 1
        return tok

    def expect(self, kind: TokenKind) -> Token:
        tok = self.peek()
        if tok.kind is not kind:
            raise MetaSyntaxError(
                f"expected {kind.value}, found {tok.text or tok.kind.value!r} at offset {tok.offset}"
            )
        return self.advance()

    def attribute(self) -> Meta:
        self.expect(TokenKind.POUND)
        if self.peek().kind is TokenKind.BANG:
            self.advance()
        self.expect(TokenKind.LBRACKET)
        meta = self.meta()
        self.expect(TokenKind.RBRACKET)
        self.expect(TokenKind.EOF)
        return meta

    def meta(self) -> Meta:
        leading_colon = False
        if self.peek().kind is TokenKind.PATH_SEP:
            self.advance()
            leading_colon = True
        segments = [self.expect(TokenKind.IDENT).text]
        while self.peek().kind is TokenKind.PATH_SEP:
            self.advance()
            segments.append(self.expect(TokenKind.IDENT).text)
        path = tuple(segments)

        if self.peek().kind is TokenKind.LPAREN:
            self.advance()
            return Meta(path=path, leading_colon=leading_colon, nested=self.nested_list())
        if self.peek().kind is TokenKind.EQ:
            self.advance()
            return Meta(path=path, leading_colon=leading_colon, value=self.literal())
        return Meta(path=path, leading_colon=leading_colon)

    def nested_list(self) -> tuple[Meta | Lit, ...]:
        items: list[Meta | Lit] = []
        while self.peek().kind is not TokenKind.RPAREN:
            items.append(self.nested())
            if self.peek().kind is not TokenKind.COMMA:
                break
            self.advance()
        self.expect(TokenKind.RPAREN)
        return tuple(items)

    def nested(self) -> Meta | Lit:
        tok = self.peek()
        if self._at_literal():
            return self.literal()
        if tok.kind in (TokenKind.IDENT, TokenKind.PATH_SEP):
            return self.meta()
        raise MetaSyntaxError(f"unexpected {tok.text or tok.kind.value!r} at offset {tok.offset}")

    def literal(self) -> Lit:
        if not self._at_literal():
            tok = self.peek()
            raise MetaSyntaxError(
                f"expected literal, found {tok.text or tok.kind.value!r} at offset {tok.offset}"
            )
        return Lit(text=self.advance().text)

    def _at_literal(self) -> bool:
        tok = self.peek()
        if tok.kind is TokenKind.LITERAL:
            return True
        # `true`/`false` are literals unless used as the name of a name-value pair
        return (
            tok.kind is TokenKind.IDENT
            and tok.text in ("true", "false")
            and self.peek(1).kind is not TokenKind.EQ
        )


def parse_attribute(text: str) -> Meta:
    """Parse the full text of an attribute into its meta item.

    Args:
        text (str): Attribute source text including ``#``, the optional ``!``
            and the brackets, e.g. ``#![deny(warnings)]``.

    Returns:
        Meta: The meta item inside the brackets.

    Raises:
        MetaSyntaxError: If the content is not a well-formed meta item.
    """
    return _MetaParser(tokenize(text)).attribute()
