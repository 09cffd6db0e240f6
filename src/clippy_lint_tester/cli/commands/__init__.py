# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : __init__.py
#   file_relpath : src/clippy_lint_tester/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the clippy-lint-tester CLI."""

from __future__ import annotations
