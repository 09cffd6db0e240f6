# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : __init__.py
#   file_relpath : src/clippy_lint_tester/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""clippy-lint-tester package.

Tooling for testing Clippy lints against real-world crates. The core is an
attribute cleaner that neutralizes lint-control attributes (``allow``,
``warn``, ``deny``, ``clippy::msrv``) in Rust sources so that every lint
fires as if the crate authors had never configured it.
"""

from __future__ import annotations
