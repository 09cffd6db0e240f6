# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : constants.py
#   file_relpath : src/clippy_lint_tester/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""clippy-lint-tester constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TOOL_VERSION: str = get_version("clippy-lint-tester")
except PackageNotFoundError:  # running from a source checkout
    TOOL_VERSION = "0.0.0"

TOOL_NAME: str = "clippy_lint_tester"

# Markers wrapped around neutralized attributes. The attribute text sits
# between them verbatim, so the pair must form a valid Rust block comment.
COMMENT_START_MARKER: str = f"/* cleaned by {TOOL_NAME} "
COMMENT_END_MARKER: str = " */"

MSRV_ATTRIBUTE_PATH: tuple[str, ...] = ("clippy", "msrv")
CFG_ATTR: str = "cfg_attr"

RUST_SOURCE_SUFFIX: str = ".rs"
SOURCE_BACKUP_SUFFIX: str = ".orig"
CONFIG_BACKUP_SUFFIX: str = ".bak"

CARGO_MANIFEST_NAME: str = "Cargo.toml"
CLIPPY_CONFIG_NAMES: tuple[str, ...] = (".clippy.toml", "clippy.toml")
DEPENDENCY_TABLES: tuple[str, ...] = ("dependencies", "build-dependencies", "dev-dependencies")
DEFAULT_CRATE_ROOTS: tuple[str, ...] = ("src/lib.rs", "src/main.rs")

LOG_LEVEL_ENV_VAR: str = "CLIPPY_LINT_TESTER_LOG_LEVEL"
