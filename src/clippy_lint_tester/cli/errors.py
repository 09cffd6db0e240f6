# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : errors.py
#   file_relpath : src/clippy_lint_tester/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the clippy-lint-tester CLI.

Raise these in commands to stop with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from clippy_lint_tester.cli.exit_codes import ExitCode


class ClippyLintTesterError(click.ClickException):
    """Base class for all CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class UsageError(ClippyLintTesterError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class ConfigError(ClippyLintTesterError):
    """Missing or malformed Cargo manifest."""

    exit_code = ExitCode.CONFIG_ERROR


class FileNotFoundCliError(ClippyLintTesterError):
    """Input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class IOCliError(ClippyLintTesterError):
    """I/O error reading or writing files."""

    exit_code = ExitCode.IO_ERROR
