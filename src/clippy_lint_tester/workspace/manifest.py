# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : manifest.py
#   file_relpath : src/clippy_lint_tester/workspace/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prepare a downloaded crate for standalone linting.

Crates published from a workspace often keep ``path`` dependencies and a
``[workspace]`` table that only make sense inside their repository. This
module rewrites ``Cargo.toml`` so every dependency resolves from the registry,
and renames Clippy config files so project-level lint configuration does not
apply.

Manifests are edited with `tomlkit`, which keeps comments and formatting of
the untouched parts of the document.
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping, Sequence
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from clippy_lint_tester.config.logging import get_logger
from clippy_lint_tester.constants import (
    CARGO_MANIFEST_NAME,
    CLIPPY_CONFIG_NAMES,
    CONFIG_BACKUP_SUFFIX,
    DEFAULT_CRATE_ROOTS,
    DEPENDENCY_TABLES,
)
from clippy_lint_tester.utils.file import backup_path, make_backup
from clippy_lint_tester.workspace.errors import ManifestError, WorkspaceError

if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit import TOMLDocument

    from clippy_lint_tester.config.logging import ClippyLintTesterLogger

logger: ClippyLintTesterLogger = get_logger(__name__)


def load_manifest(path: Path) -> TOMLDocument:
    """Read and parse a Cargo manifest.

    Raises:
        ManifestError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Failed to read Cargo.toml '{path}': {exc}") from exc
    try:
        return tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ManifestError(f"Failed to parse Cargo.toml '{path}': {exc}") from exc


def _remove_paths(table: Any) -> bool:
    """Drop ``path`` keys from the dependency specs of ``table``.

    A dependency that loses its path and has no version gets ``version = "*"``.
    """
    if not isinstance(table, MutableMapping):
        return False
    removed = False
    for name, spec in table.items():
        if not isinstance(spec, MutableMapping) or "path" not in spec:
            continue
        del spec["path"]
        if "version" not in spec:
            spec["version"] = "*"
        logger.debug("Replaced path dependency %s", name)
        removed = True
    return removed


def _dependency_tables(doc: TOMLDocument) -> list[Any]:
    tables: list[Any] = [doc.get(name) for name in DEPENDENCY_TABLES]
    # [target.'cfg(...)'.dependencies] and friends
    targets = doc.get("target")
    if isinstance(targets, MutableMapping):
        for target in targets.values():
            if isinstance(target, MutableMapping):
                tables.extend(target.get(name) for name in DEPENDENCY_TABLES)
    return tables


def clean_cargo_manifest(path: Path) -> bool:
    """Replace path dependencies with registry versions and drop ``[workspace]``.

    The original manifest is copied to ``Cargo.toml.bak`` before it is
    rewritten. Nothing is written when nothing needed to change.

    Args:
        path (Path): The ``Cargo.toml`` to clean.

    Returns:
        bool: True if the manifest was rewritten.

    Raises:
        ManifestError: If the manifest cannot be read, parsed or written.
    """
    doc = load_manifest(path)

    changed = False
    for table in _dependency_tables(doc):
        changed |= _remove_paths(table)
    if "workspace" in doc:
        del doc["workspace"]
        changed = True

    if not changed:
        logger.debug("Manifest %s needs no changes", path)
        return False

    try:
        make_backup(path, CONFIG_BACKUP_SUFFIX)
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Replacing Cargo.toml contents '{path}': {exc}") from exc
    logger.info("Rewrote %s", path)
    return True


def disable_clippy_config(crate_dir: Path) -> list[Path]:
    """Rename ``.clippy.toml`` / ``clippy.toml`` in ``crate_dir`` to ``*.toml.bak``.

    Returns:
        list[Path]: The config files that were renamed.

    Raises:
        WorkspaceError: If a rename fails.
    """
    renamed: list[Path] = []
    for name in CLIPPY_CONFIG_NAMES:
        config_path = crate_dir / name
        if not config_path.exists():
            continue
        try:
            config_path.rename(backup_path(config_path, CONFIG_BACKUP_SUFFIX))
        except OSError as exc:
            raise WorkspaceError(f"Renaming {config_path}: {exc}") from exc
        logger.info("Disabled %s", config_path)
        renamed.append(config_path)
    return renamed


def clean_config(crate_dir: Path) -> None:
    """Modify the Cargo manifest and Clippy config of a crate for testing.

    Raises:
        ManifestError: If ``Cargo.toml`` cannot be processed.
        WorkspaceError: If a Clippy config file cannot be renamed.
    """
    clean_cargo_manifest(crate_dir / CARGO_MANIFEST_NAME)
    disable_clippy_config(crate_dir)


def _touch(path: Path) -> None:
    os.utime(path)
    logger.debug("Touched %s", path)


def touch_crate_roots(crate_dir: Path) -> list[Path]:
    """Bump the mtime of every crate root so cargo re-checks the crate.

    Roots are the ``[lib]`` path, every ``[[bin]]`` path, and the default
    ``src/lib.rs`` / ``src/main.rs`` when present.

    Returns:
        list[Path]: The files that were touched.

    Raises:
        ManifestError: If the manifest cannot be read or a declared root is missing.
    """
    doc = load_manifest(crate_dir / CARGO_MANIFEST_NAME)

    declared: list[Path] = []
    lib = doc.get("lib")
    if isinstance(lib, MutableMapping) and isinstance(lib.get("path"), str):
        declared.append(crate_dir / str(lib["path"]))
    bins = doc.get("bin")
    if isinstance(bins, Sequence) and not isinstance(bins, str):
        for section in bins:
            if isinstance(section, MutableMapping) and isinstance(section.get("path"), str):
                declared.append(crate_dir / str(section["path"]))

    touched: list[Path] = []
    for root_path in declared:
        try:
            _touch(root_path)
        except OSError as exc:
            raise ManifestError(f"Failed to set mtime for '{root_path}': {exc}") from exc
        touched.append(root_path)

    for default_root in DEFAULT_CRATE_ROOTS:
        root_path = crate_dir / default_root
        try:
            _touch(root_path)
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise ManifestError(f"Failed to set mtime for '{root_path}': {exc}") from exc
        if root_path not in touched:
            touched.append(root_path)
    return touched
