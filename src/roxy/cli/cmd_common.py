# roxy:header:start
#
#   project      : Roxy
#   file         : cmd_common.py
#   file_relpath : src/roxy/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Helpers shared by Roxy CLI commands.

Commands resolve their configuration the same way: defaults, then the explicit
or discovered configuration file, then CLI overrides. Configuration errors are
translated into `RoxyConfigError` so Click exits with ``CONFIG_ERROR``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from roxy.cli.errors import RoxyConfigError
from roxy.config import MutableConfig
from roxy.config.logging import get_logger
from roxy.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from roxy.config import Config
    from roxy.config.logging import RoxyLogger

logger: RoxyLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity as a small integer.

    ``0`` is the default, positive values mean ``-v`` was given, negative
    values mean ``-q`` was given.

    Args:
        ctx (click.Context): The current Click context.

    Returns:
        int: Effective verbosity.
    """
    level: int = (ctx.obj or {}).get("verbosity_level", logging.WARNING)
    if level <= logging.DEBUG:
        return 2
    if level <= logging.INFO:
        return 1
    if level >= logging.ERROR:
        return -1
    return 0


def build_config_common(
    *,
    config_file: Path | None,
    steps: Iterable[str] = (),
    variables: Iterable[tuple[str, str]] = (),
    source: Path | None = None,
    output: Path | None = None,
    dry_run: bool | None = None,
) -> Config:
    """Resolve the effective configuration for a command.

    Args:
        config_file (Path | None): Explicit ``--config`` file.
        steps (Iterable[str]): ``--step`` values (empty keeps the configured steps).
        variables (Iterable[tuple[str, str]]): ``--var`` bindings.
        source (Path | None): Source directory override.
        output (Path | None): Output directory override.
        dry_run (bool | None): ``--dry-run`` flag (``None`` when not given).

    Returns:
        Config: The frozen configuration.

    Raises:
        RoxyConfigError: If the configuration file cannot be read or parsed.
    """
    args: dict[str, Any] = {
        "steps": [s.lower() for s in steps],
        "vars": dict(variables),
        "source": source,
        "output": output,
        "dry_run": dry_run,
    }
    try:
        draft: MutableConfig = MutableConfig.load_merged(config_file=config_file)
    except ConfigError as exc:
        raise RoxyConfigError(str(exc)) from exc
    config: Config = draft.apply_cli_args(args).freeze()
    logger.trace("Effective configuration: %s", config)
    return config
