# roxy:header:start
#
#   project      : Roxy
#   file         : errors.py
#   file_relpath : src/roxy/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Exceptions for the Roxy CLI.

Usage:
    Commands translate core exceptions with `cli_error_for` and raise the result;
    Click prints the message and exits with the error's ``exit_code``.

Styling:
    Errors prefer the project console if available (see `RoxyCliError.show`);
    without one in the Click context they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from roxy.core.errors import ConfigError, InvalidLocatorError, TransformError
from roxy.core.exit_codes import ExitCode


class RoxyCliError(click.ClickException):
    """Base class for all Roxy CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class RoxyUsageError(RoxyCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RoxyConfigError(RoxyCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class RoxyFileNotFoundError(RoxyCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class RoxyPermissionDeniedError(RoxyCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class RoxyIOError(RoxyCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class RoxyTransformError(RoxyCliError):
    """Error for a pipeline step rejecting an asset."""

    exit_code = ExitCode.TRANSFORM_ERROR


class RoxyInvalidLocatorError(RoxyCliError):
    """Error for a path that cannot be represented as text."""

    exit_code = ExitCode.INVALID_LOCATOR


class RoxyUnexpectedError(RoxyCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def _os_error_message(exc: OSError) -> str:
    if exc.strerror and exc.filename:
        return f"{exc.strerror}: {exc.filename}"
    return str(exc)


def cli_error_for(exc: BaseException) -> RoxyCliError:
    """Translate a core exception into the matching CLI error.

    Args:
        exc (BaseException): Exception raised by the engine, pipeline or config layer.

    Returns:
        RoxyCliError: The CLI error carrying the message and exit code.
    """
    if isinstance(exc, TransformError):
        return RoxyTransformError(str(exc))
    if isinstance(exc, InvalidLocatorError):
        return RoxyInvalidLocatorError(str(exc))
    if isinstance(exc, ConfigError):
        return RoxyConfigError(str(exc))
    if isinstance(exc, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
        return RoxyFileNotFoundError(_os_error_message(exc))
    if isinstance(exc, PermissionError):
        return RoxyPermissionDeniedError(_os_error_message(exc))
    if isinstance(exc, OSError):
        return RoxyIOError(str(exc))
    return RoxyUnexpectedError(f"{type(exc).__name__}: {exc}")
