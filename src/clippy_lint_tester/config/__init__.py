# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : __init__.py
#   file_relpath : src/clippy_lint_tester/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for clippy-lint-tester (logging setup)."""

from __future__ import annotations
