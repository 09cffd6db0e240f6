# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : errors.py
#   file_relpath : src/clippy_lint_tester/workspace/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the workspace layer.

These are plain exceptions; the CLI translates them into
`clippy_lint_tester.cli.errors.ClippyLintTesterError` subclasses with exit codes.
"""

from __future__ import annotations


class WorkspaceError(Exception):
    """A file or directory could not be read, written or classified."""


class ManifestError(WorkspaceError):
    """A Cargo manifest is missing or malformed."""
