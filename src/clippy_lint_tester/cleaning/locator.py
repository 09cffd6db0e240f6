# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : locator.py
#   file_relpath : src/clippy_lint_tester/cleaning/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate lint-control attributes in a parsed Rust file.

Recognized directives are ``allow``, ``warn``, ``deny`` and ``clippy::msrv``.
A directive may be wrapped in any number of ``cfg_attr(condition, inner)``
layers; matching is decided on the innermost meta, but the recorded span
always covers the whole outermost attribute so that commenting it out also
removes the condition.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from clippy_lint_tester.cleaning.errors import MetaSyntaxError
from clippy_lint_tester.cleaning.meta import Meta, parse_attribute
from clippy_lint_tester.cleaning.parser import AttributeVisitor, SyntaxTree, walk
from clippy_lint_tester.cleaning.spans import MatchSpan
from clippy_lint_tester.config.logging import get_logger
from clippy_lint_tester.constants import CFG_ATTR, MSRV_ATTRIBUTE_PATH

if TYPE_CHECKING:
    from tree_sitter import Node

    from clippy_lint_tester.config.logging import ClippyLintTesterLogger

logger: ClippyLintTesterLogger = get_logger(__name__)


class DirectivePattern(Enum):
    """The closed set of attribute paths treated as lint directives."""

    ALLOW = ("allow",)
    WARN = ("warn",)
    DENY = ("deny",)
    MSRV = MSRV_ATTRIBUTE_PATH

    @classmethod
    def match(cls, meta: Meta) -> DirectivePattern | None:
        """Return the pattern whose path equals the path of ``meta``, if any."""
        for pattern in cls:
            if meta.is_path(pattern.value):
                return pattern
        return None


def resolve_cfg_attr(meta: Meta) -> Meta | None:
    """Unwrap ``cfg_attr`` layers down to the governed meta.

    A ``cfg_attr`` is only unwrapped when it carries exactly two arguments and
    the second one is a meta item. Any other shape, such as
    ``cfg_attr(cond, path = "x", inline)`` or ``cfg_attr(cond, "lit")``,
    resolves to None so it is never mistaken for a lint directive.

    Args:
        meta (Meta): The meta item of an attribute.

    Returns:
        Meta | None: The innermost meta, or None if a wrapper is malformed.
    """
    current = meta
    while current.is_ident(CFG_ATTR):
        if current.nested is None:
            # `#[cfg_attr]` or `#[cfg_attr = ...]`: not a wrapper, and not a directive
            return current
        if len(current.nested) != 2 or not isinstance(current.nested[1], Meta):
            return None
        current = current.nested[1]
    return current


class LintAttributeLocator(AttributeVisitor):
    """Visitor collecting the spans of lint-control attributes."""

    def __init__(self) -> None:
        self.spans: list[MatchSpan] = []

    def visit_attribute(self, tree: SyntaxTree, node: Node) -> None:
        text = tree.text(node)
        try:
            meta = parse_attribute(text)
        except MetaSyntaxError as exc:
            logger.trace("Skipping attribute %r: %s", text, exc)
            return

        resolved = resolve_cfg_attr(meta)
        if resolved is None:
            logger.trace("Skipping cfg_attr without a single governed attribute: %s", meta)
            return

        pattern = DirectivePattern.match(resolved)
        if pattern is None:
            return

        span = MatchSpan(
            start=tree.position(node.start_point),
            end=tree.position(node.end_point),
        )
        logger.debug(
            "Matched %s at %d:%d-%d:%d: %s",
            pattern.name,
            span.start.line,
            span.start.column,
            span.end.line,
            span.end.column,
            meta,
        )
        self.spans.append(span)


def locate_lint_attributes(tree: SyntaxTree) -> list[MatchSpan]:
    """Return the spans of all lint-control attributes of ``tree`` in source order."""
    visitor = LintAttributeLocator()
    walk(tree, visitor)
    return visitor.spans
