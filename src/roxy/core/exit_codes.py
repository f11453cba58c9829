# roxy:header:start
#
#   project      : Roxy
#   file         : exit_codes.py
#   file_relpath : src/roxy/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Exit codes for Roxy.

Roxy aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. `INVALID_LOCATOR=3` is the one deliberate
divergence: it reports a path that cannot be represented as text, which is detected
before any I/O is attempted.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Roxy CLI and batch engine.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        INVALID_LOCATOR: An input or output path cannot be represented as a text path.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        TRANSFORM_ERROR: A transformation step rejected the asset (e.g. template
            syntax error or undefined binding). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions (read/write). Mirrors BSD
            ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    INVALID_LOCATOR = 3  # deliberate divergence from sysexits; see module docstring

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    TRANSFORM_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
