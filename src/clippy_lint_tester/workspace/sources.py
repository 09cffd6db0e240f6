# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : sources.py
#   file_relpath : src/clippy_lint_tester/workspace/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Clean lint-control attributes from Rust source files in place.

Each file is processed independently: a syntax error in one file is recorded
and the batch carries on. A changed file is first copied to
``<name>.rs.orig`` and then overwritten; an unchanged file is never rewritten.

I/O failures on an explicitly named file abort with `WorkspaceError`. While
walking a directory, files that are not valid UTF-8 are skipped with a warning,
since vendored crates occasionally ship such test fixtures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from clippy_lint_tester.cleaning.api import Changed, ParseFailed, Unchanged, clean
from clippy_lint_tester.config.logging import get_logger
from clippy_lint_tester.constants import RUST_SOURCE_SUFFIX, SOURCE_BACKUP_SUFFIX
from clippy_lint_tester.utils.file import make_backup, read_text_exact, write_text_exact
from clippy_lint_tester.workspace.errors import WorkspaceError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from clippy_lint_tester.config.logging import ClippyLintTesterLogger

logger: ClippyLintTesterLogger = get_logger(__name__)


class FileStatus(Enum):
    """Per-file outcome of an attribute-cleaning run."""

    UNCHANGED = "unchanged"
    CLEANED = "cleaned"
    WOULD_CLEAN = "would clean"
    PARSE_FAILED = "parse failed"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class FileCleanResult:
    """What happened to one file.

    ``original`` and ``cleaned`` are set when the file changed (or would change
    in a dry run); ``error`` is set for `FileStatus.PARSE_FAILED`.
    """

    path: Path
    status: FileStatus
    original: str | None = None
    cleaned: str | None = None
    error: ParseFailed | None = None

    @property
    def changed(self) -> bool:
        return self.status in (FileStatus.CLEANED, FileStatus.WOULD_CLEAN)


@dataclass(frozen=True, slots=True)
class FileCleanError:
    """A parse failure recorded against the file it occurred in."""

    path: Path
    error: ParseFailed

    def __str__(self) -> str:
        return f"{self.path}:{self.error.line}:{self.error.column}: {self.error.message}"


def clean_attrs_file(path: Path, *, dry_run: bool = False) -> FileCleanResult:
    """Clean one Rust source file in place.

    Args:
        path (Path): The file to clean.
        dry_run (bool): Compute the outcome without touching the file.

    Returns:
        FileCleanResult: The outcome for ``path``.

    Raises:
        WorkspaceError: If the file cannot be read, decoded, backed up or written.
    """
    try:
        source = read_text_exact(path)
    except UnicodeDecodeError as exc:
        raise WorkspaceError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise WorkspaceError(f"Reading file {path}: {exc}") from exc

    outcome = clean(source)
    match outcome:
        case Unchanged():
            logger.debug("No lint attributes in %s", path)
            return FileCleanResult(path=path, status=FileStatus.UNCHANGED)
        case ParseFailed():
            logger.info(
                "Failed to parse %s at %d:%d: %s",
                path,
                outcome.line,
                outcome.column,
                outcome.message,
            )
            return FileCleanResult(path=path, status=FileStatus.PARSE_FAILED, error=outcome)
        case Changed(text=cleaned):
            if dry_run:
                return FileCleanResult(
                    path=path, status=FileStatus.WOULD_CLEAN, original=source, cleaned=cleaned
                )
            try:
                make_backup(path, SOURCE_BACKUP_SUFFIX)
                write_text_exact(path, cleaned)
            except OSError as exc:
                raise WorkspaceError(f"Writing cleaned file {path}: {exc}") from exc
            logger.info("Cleaned %s", path)
            return FileCleanResult(
                path=path, status=FileStatus.CLEANED, original=source, cleaned=cleaned
            )
    raise AssertionError(f"unexpected clean outcome: {outcome!r}")


def iter_rust_sources(root: Path) -> Iterator[Path]:
    """Yield every ``*.rs`` file below ``root`` in a stable (sorted) order."""
    for path in sorted(root.rglob(f"*{RUST_SOURCE_SUFFIX}")):
        if path.is_file():
            yield path


def clean_attrs_tree(path: Path, *, dry_run: bool = False) -> list[FileCleanResult]:
    """Clean a single file, or every Rust source below a directory.

    Args:
        path (Path): A file or a directory.
        dry_run (bool): Compute outcomes without touching any file.

    Returns:
        list[FileCleanResult]: One result per file considered.

    Raises:
        WorkspaceError: If ``path`` is neither a file nor a directory, or if an
            explicitly named file cannot be processed.
    """
    if path.is_file():
        return [clean_attrs_file(path, dry_run=dry_run)]
    if not path.is_dir():
        raise WorkspaceError(f"Path not file or dir: {path}")

    results: list[FileCleanResult] = []
    for source_path in iter_rust_sources(path):
        try:
            results.append(clean_attrs_file(source_path, dry_run=dry_run))
        except WorkspaceError as exc:
            if not isinstance(exc.__cause__, UnicodeDecodeError):
                raise
            logger.warning("Skipping %s", exc)
            results.append(FileCleanResult(path=source_path, status=FileStatus.SKIPPED))
    return results


def clean_attrs(path: Path) -> list[FileCleanError]:
    """Remove every attribute that could affect linting below ``path``.

    Args:
        path (Path): A Rust source file or a directory of them.

    Returns:
        list[FileCleanError]: The files that could not be parsed, in walk order.

    Raises:
        WorkspaceError: See `clean_attrs_tree`.
    """
    return [
        FileCleanError(path=r.path, error=r.error)
        for r in clean_attrs_tree(path)
        if r.error is not None
    ]
