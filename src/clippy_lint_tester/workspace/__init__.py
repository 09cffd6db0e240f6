# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : __init__.py
#   file_relpath : src/clippy_lint_tester/workspace/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-system plumbing around the attribute cleaner.

Cleans whole crates in place (with backups), rewrites Cargo manifests for
standalone linting, and touches crate roots so cargo re-lints them.
"""

from __future__ import annotations

from clippy_lint_tester.workspace.errors import ManifestError, WorkspaceError
from clippy_lint_tester.workspace.manifest import (
    clean_cargo_manifest,
    clean_config,
    disable_clippy_config,
    touch_crate_roots,
)
from clippy_lint_tester.workspace.sources import (
    FileCleanError,
    FileCleanResult,
    FileStatus,
    clean_attrs,
    clean_attrs_file,
    clean_attrs_tree,
)

__all__ = [
    "FileCleanError",
    "FileCleanResult",
    "FileStatus",
    "ManifestError",
    "WorkspaceError",
    "clean_attrs",
    "clean_attrs_file",
    "clean_attrs_tree",
    "clean_cargo_manifest",
    "clean_config",
    "disable_clippy_config",
    "touch_crate_roots",
]
