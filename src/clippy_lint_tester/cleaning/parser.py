# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : parser.py
#   file_relpath : src/clippy_lint_tester/cleaning/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rust parser adapter built on tree-sitter.

`parse_rust` turns source text into a `SyntaxTree` or raises `ParseError`
for the first syntax error in document order. tree-sitter reports positions
as (row, byte column); the adapter converts them to `SourcePosition` values
with 1-based lines and 0-based *character* columns so that the rest of the
cleaner never deals with bytes until the final splice.

Errors are reported in two passes. Delimiters are checked first, over the
whole token sequence: a stray closer is reported where it stands, an unclosed
opener at the end of input. Otherwise the first ERROR or MISSING node decides,
and for an ERROR node the position is that of the first token after the
tokens the parser discarded.

`walk` drives an `AttributeVisitor` over every attribute node of the tree.
tree-sitter does not parse macro bodies into syntax nodes, so attributes
inside macro invocations are never visited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tree_sitter_language_pack import get_parser

from clippy_lint_tester.cleaning.errors import MetaSyntaxError, ParseError
from clippy_lint_tester.cleaning.meta import parse_attribute
from clippy_lint_tester.cleaning.spans import SourcePosition
from clippy_lint_tester.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tree_sitter import Node, Tree

    from clippy_lint_tester.config.logging import ClippyLintTesterLogger

logger: ClippyLintTesterLogger = get_logger(__name__)

ATTRIBUTE_NODE_TYPES: frozenset[str] = frozenset({"attribute_item", "inner_attribute_item"})

_SNIPPET_MAX_CHARS = 24

_OPENERS: frozenset[str] = frozenset({"(", "[", "{"})
_CLOSERS: dict[str, str] = {")": "(", "]": "[", "}": "{"}


@dataclass(frozen=True, slots=True)
class SyntaxTree:
    """A parsed Rust file together with the bytes it was parsed from."""

    tree: Tree
    source: bytes
    lines: tuple[bytes, ...]  # source split on b"\n"

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        """Return the source text covered by ``node``."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def position(self, point: tuple[int, int]) -> SourcePosition:
        """Convert a tree-sitter (row, byte column) point to a `SourcePosition`."""
        row, byte_column = point
        line = self.lines[row] if row < len(self.lines) else b""
        column = len(line[:byte_column].decode("utf-8", errors="replace"))
        return SourcePosition(line=row + 1, column=column)

    def end_position(self) -> SourcePosition:
        """Return the position just past the last character of the source."""
        return SourcePosition(line=len(self.lines), column=len(self.lines[-1].decode("utf-8")))


class AttributeVisitor:
    """Visitor hook invoked for each attribute found by `walk`."""

    def visit_attribute(self, tree: SyntaxTree, node: Node) -> None:
        """Handle one ``#[...]`` or ``#![...]`` attribute (an attribute item, or
        an ERROR node holding exactly one attribute)."""


def is_attribute_error(tree: SyntaxTree, node: Node) -> bool:
    """Return True if ``node`` is an ERROR node holding exactly one attribute.

    The grammar has no rule for some attribute positions rustc accepts, such
    as closure parameters (``|#[allow(unused)] a| a``). Those attributes come
    back as ERROR nodes covering only the attribute text.
    """
    if not node.is_error:
        return False
    text = tree.text(node)
    if not text.startswith("#"):
        return False
    try:
        parse_attribute(text)
    except MetaSyntaxError:
        return False
    return True


def walk(tree: SyntaxTree, visitor: AttributeVisitor) -> None:
    """Visit every attribute node of ``tree`` in source order.

    Attributes do not nest, so the walk does not descend into attribute nodes.
    """
    stack: list[Node] = [tree.root]
    while stack:
        node = stack.pop()
        if node.type in ATTRIBUTE_NODE_TYPES or is_attribute_error(tree, node):
            visitor.visit_attribute(tree, node)
            continue
        stack.extend(reversed(node.children))


def _iter_tokens(root: Node) -> Iterator[Node]:
    # Leaves in document order, without comments and inserted MISSING tokens.
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if node.is_extra or node.is_missing:
            continue
        if node.child_count == 0:
            yield node
        else:
            stack.extend(reversed(node.children))


def _unbalanced_delimiter(tree: SyntaxTree) -> tuple[SourcePosition, str] | None:
    """Return the first delimiter error, the way a token-stream lexer sees it.

    A closing delimiter with no matching opener is reported at the closer;
    openers still pending at the end are reported at the end of input.
    """
    pending: list[str] = []
    for token in _iter_tokens(tree.root):
        if token.type in _OPENERS:
            pending.append(token.type)
        elif token.type in _CLOSERS:
            if not pending or _CLOSERS[token.type] != pending[-1]:
                return tree.position(token.start_point), f"unexpected `{token.type}`"
            pending.pop()
    if pending:
        return tree.end_position(), "unexpected end of input"
    return None


def _first_error(tree: SyntaxTree) -> Node | None:
    # Pre-order search, pruning subtrees without errors.
    stack: list[Node] = [tree.root]
    while stack:
        node = stack.pop()
        if is_attribute_error(tree, node):
            continue
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _locate_error(tree: SyntaxTree, node: Node) -> tuple[SourcePosition, str]:
    """Return the position and message for the error represented by ``node``.

    An ERROR node holds the tokens the parser discarded to recover; the token
    that could not be accepted is the first one after them.
    """
    if node.is_missing:
        return tree.position(node.start_point), f"expected `{node.type}`"
    for token in _iter_tokens(tree.root):
        if token.start_byte >= node.end_byte:
            snippet = tree.text(token).split("\n", 1)[0]
            if len(snippet) > _SNIPPET_MAX_CHARS:
                snippet = snippet[:_SNIPPET_MAX_CHARS] + "..."
            return tree.position(token.start_point), f"unexpected `{snippet}`"
    return tree.end_position(), "unexpected end of input"


def parse_rust(source: str) -> SyntaxTree:
    """Parse Rust source text.

    Args:
        source (str): The complete text of one Rust source file.

    Returns:
        SyntaxTree: The parsed tree.

    Raises:
        ParseError: If the source contains a syntax error; the error carries
            the 1-based line and 0-based character column of the first one.
    """
    data = source.encode("utf-8")
    tree = SyntaxTree(
        tree=get_parser("rust").parse(data),
        source=data,
        lines=tuple(data.split(b"\n")),
    )

    if tree.root.has_error:
        located = _unbalanced_delimiter(tree)
        if located is None:
            node = _first_error(tree)
            if node is not None:
                located = _locate_error(tree, node)
        if located is not None:
            pos, message = located
            logger.debug("Syntax error at %d:%d: %s", pos.line, pos.column, message)
            raise ParseError(pos.line, pos.column, message)
        logger.trace("Accepted attributes the grammar reports as errors")

    logger.trace("Parsed %d bytes (%d lines)", len(data), len(tree.lines))
    return tree
