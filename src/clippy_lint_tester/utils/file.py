# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : file.py
#   file_relpath : src/clippy_lint_tester/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-system helpers."""

from __future__ import annotations

import os
import shutil
from enum import Enum
from pathlib import Path

from clippy_lint_tester.config.logging import get_logger

logger = get_logger(__name__)


class EnsureEmptyDirOutcome(Enum):
    """Result of `ensure_empty_dir`."""

    CREATED = "created"
    EMPTY = "empty"
    NON_EMPTY = "non-empty"


def ensure_empty_dir(path: Path) -> EnsureEmptyDirOutcome:
    """Create ``path`` if missing and report whether it is empty.

    Args:
        path (Path): Directory to check.

    Returns:
        EnsureEmptyDirOutcome: Whether the directory was created, is empty, or has entries.

    Raises:
        OSError: If ``path`` exists but cannot be listed, or cannot be created.
    """
    try:
        with os.scandir(path) as entries:
            has_entries = next(entries, None) is not None
    except FileNotFoundError:
        path.mkdir(parents=True)
        logger.debug("Created directory %s", path)
        return EnsureEmptyDirOutcome.CREATED
    return EnsureEmptyDirOutcome.NON_EMPTY if has_entries else EnsureEmptyDirOutcome.EMPTY


def backup_path(path: Path, suffix: str) -> Path:
    """Return the backup location for ``path``: the same name with ``suffix`` appended.

    Example:
        ``src/lib.rs`` with suffix ``.orig`` becomes ``src/lib.rs.orig``.
    """
    return path.with_name(path.name + suffix)


def make_backup(path: Path, suffix: str) -> Path:
    """Copy ``path`` (content and metadata) to its backup location.

    Returns:
        Path: The backup path.
    """
    backup = backup_path(path, suffix)
    shutil.copy2(path, backup)
    logger.debug("Backed up %s to %s", path, backup)
    return backup


def read_text_exact(path: Path) -> str:
    """Read UTF-8 text without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fp:
        return fp.read()


def write_text_exact(path: Path, text: str) -> None:
    """Write UTF-8 text without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as fp:
        fp.write(text)
