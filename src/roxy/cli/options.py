# roxy:header:start
#
#   project      : Roxy
#   file         : options.py
#   file_relpath : src/roxy/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Common CLI option utilities for the Roxy CLI.

This module centralizes reusable options (verbosity, color, configuration file,
template variables, dry run) and their resolution logic, so commands and the
group can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Callable, ParamSpec, TypeVar

import click

from roxy.cli.errors import RoxyUsageError
from roxy.config.logging import TRACE_LEVEL
from roxy.pipeline.pipelines import StepName

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        RoxyUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RoxyUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags, then the FORCE_COLOR and
        NO_COLOR environment variables. Defaults to color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


class KeyValueParam(click.ParamType):
    """Click parameter type parsing ``KEY=VALUE`` into a ``(key, value)`` tuple."""

    name = "KEY=VALUE"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> tuple[str, str]:
        """Split ``value`` on the first ``=``.

        Args:
            value (Any): Raw command-line value (or an already converted tuple).
            param (click.Parameter | None): The parameter being converted.
            ctx (click.Context | None): The current Click context.

        Returns:
            tuple[str, str]: The key and the (possibly empty) value.
        """
        if isinstance(value, tuple):
            return value  # type: ignore[return-value]
        key, sep, val = str(value).partition("=")
        key = key.strip()
        if not sep or not key:
            self.fail(f"{value!r} is not of the form KEY=VALUE", param, ctx)
        return key, val


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config, --var and --dry-run options to a command."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file (default: ./roxy.toml or [tool.roxy] in ./pyproject.toml).",
    )(f)
    f = click.option(
        "--var",
        "variables",
        type=KeyValueParam(),
        multiple=True,
        help="Template binding KEY=VALUE (repeatable; overrides [context]).",
    )(f)
    f = click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        default=None,
        help="Run the pipeline but do not write any output.",
    )(f)
    return f


def step_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds a repeatable --step option overriding ``[pipeline] steps``."""
    return click.option(
        "--step",
        "steps",
        type=click.Choice([s.value for s in StepName], case_sensitive=False),
        multiple=True,
        help="Pipeline step, in order (repeatable; overrides [pipeline] steps).",
    )(f)
