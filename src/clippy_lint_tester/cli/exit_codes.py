# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : exit_codes.py
#   file_relpath : src/clippy_lint_tester/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the clippy-lint-tester CLI.

The codes follow the BSD ``sysexits`` convention where practical. The one
deliberate divergence is ``WOULD_CHANGE = 2``, used by ``clean-source --check``
to signal that files would be rewritten. Click reports its own usage errors
with 2 as well, so callers that care must also look at the output.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure. Prefer a more specific code if available.
        WOULD_CHANGE: Check mode: files would be cleaned without ``--check``.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        PARSE_ERROR: At least one Rust source could not be parsed. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing or malformed Cargo manifest. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
