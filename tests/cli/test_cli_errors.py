# roxy:header:start
#
#   project      : Roxy
#   file         : test_cli_errors.py
#   file_relpath : tests/cli/test_cli_errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Translation of core exceptions into CLI errors and exit codes."""

from __future__ import annotations

import errno

from roxy.cli.errors import (
    RoxyConfigError,
    RoxyFileNotFoundError,
    RoxyInvalidLocatorError,
    RoxyIOError,
    RoxyPermissionDeniedError,
    RoxyTransformError,
    RoxyUnexpectedError,
    cli_error_for,
)
from roxy.core.errors import ConfigError, InvalidLocatorError, TransformError
from roxy.core.exit_codes import ExitCode
from tests.conftest import parametrize


@parametrize(
    "exc, error_type, exit_code",
    [
        (TransformError("bad", step="template"), RoxyTransformError, ExitCode.TRANSFORM_ERROR),
        (InvalidLocatorError(b"\xff", "bad"), RoxyInvalidLocatorError, ExitCode.INVALID_LOCATOR),
        (ConfigError("bad"), RoxyConfigError, ExitCode.CONFIG_ERROR),
        (
            FileNotFoundError(errno.ENOENT, "No such file or directory", "a.md"),
            RoxyFileNotFoundError,
            ExitCode.FILE_NOT_FOUND,
        ),
        (
            PermissionError(errno.EACCES, "Permission denied", "a.html"),
            RoxyPermissionDeniedError,
            ExitCode.PERMISSION_DENIED,
        ),
        (OSError(errno.EIO, "I/O error"), RoxyIOError, ExitCode.IO_ERROR),
        (KeyError("x"), RoxyUnexpectedError, ExitCode.UNEXPECTED_ERROR),
    ],
)
def test_cli_error_for(exc: BaseException, error_type: type, exit_code: ExitCode) -> None:
    error = cli_error_for(exc)

    assert isinstance(error, error_type)
    assert error.exit_code == exit_code


def test_messages_keep_context() -> None:
    assert cli_error_for(TransformError("bad", step="template")).message == "template: bad"
    assert (
        cli_error_for(FileNotFoundError(errno.ENOENT, "No such file or directory", "a.md")).message
        == "No such file or directory: a.md"
    )
    assert cli_error_for(FileNotFoundError("Source directory not found: x")).message == (
        "Source directory not found: x"
    )
