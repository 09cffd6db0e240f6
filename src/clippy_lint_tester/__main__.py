# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : __main__.py
#   file_relpath : src/clippy_lint_tester/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running the tool via ``python -m clippy_lint_tester``.

Delegates to :func:`clippy_lint_tester.cli.main.cli`, the single CLI entry point.

Examples:
    Clean every Rust source below a crate directory::

        python -m clippy_lint_tester clean-source crates/regex-1.5.4
"""

from __future__ import annotations

from clippy_lint_tester.cli.main import cli

if __name__ == "__main__":
    cli()
