# roxy:header:start
#
#   project      : Roxy
#   file         : errors.py
#   file_relpath : src/roxy/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Exception taxonomy for the Roxy core.

These exceptions are CLI-free: the command layer maps them to
[`ExitCode`][roxy.core.exit_codes.ExitCode] values and user-facing messages
(see `roxy.cli.errors`).

Taxonomy:
    - `RoxyError`: base class for every error raised by Roxy itself.
    - `TransformError`: a pipeline step failed (malformed template, undefined
      binding, or any step's internal failure). Aborts the run for that asset.
    - `InvalidLocatorError`: a path/identifier cannot be represented as the text
      form the pipeline requires. Raised before any I/O is attempted.
    - `ConfigError`: a configuration file is unreadable or malformed, or names an
      unknown pipeline step.

I/O failures are not wrapped: `OSError` (and its subclasses) surface verbatim.
"""

from __future__ import annotations


class RoxyError(Exception):
    """Base class for all Roxy errors."""


class TransformError(RoxyError):
    """A pipeline step failed to transform its input.

    Attributes:
        message (str): Human-readable cause reported by the failing step.
        step (str | None): Name of the failing step, when known.
        context_id (str | None): Context identifier of the failed run, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        step: str | None = None,
        context_id: str | None = None,
    ) -> None:
        self.message = message
        self.step = step
        self.context_id = context_id
        super().__init__(message)

    def __str__(self) -> str:
        if self.step:
            return f"{self.step}: {self.message}"
        return self.message


class InvalidLocatorError(RoxyError, ValueError):
    """A locator cannot be represented as a non-empty text path.

    Attributes:
        locator (object): The offending locator, as supplied by the caller.
    """

    def __init__(self, locator: object, reason: str) -> None:
        self.locator = locator
        self.reason = reason
        super().__init__(f"Invalid locator {locator!r}: {reason}")


class ConfigError(RoxyError):
    """Configuration is unreadable, malformed, or refers to unknown steps."""
