# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : __init__.py
#   file_relpath : src/clippy_lint_tester/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for clippy-lint-tester."""

from __future__ import annotations
