# roxy:header:start
#
#   project      : Roxy
#   file         : main.py
#   file_relpath : src/roxy/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Click CLI entry point for Roxy.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- ``-v``/``-q`` set program-output verbosity and, unless ``ROXY_LOG_LEVEL`` is
  set, the internal log level. Logs always go to standard error so that
  ``roxy render IN -`` keeps standard output for the rendered bytes.
- Subcommands translate core exceptions into `RoxyCliError` subclasses that
  carry the process exit code.
"""

from __future__ import annotations

import click

from roxy.cli.commands.build import build_command
from roxy.cli.commands.config import config_command
from roxy.cli.commands.render import render_command
from roxy.cli.commands.version import version_command
from roxy.cli.console import ClickConsole
from roxy.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from roxy.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Configure internal logging (the environment wins over -v/-q):
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    if isinstance(effective_color_mode, str):
        effective_color_mode = ColorMode(effective_color_mode)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color, quiet=quiet > 0)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Roxy: render Markdown assets through a templating pipeline.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Roxy CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'roxy render INPUT OUTPUT' or 'roxy build [SOURCE] [OUTPUT]'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(render_command)

cli.add_command(build_command)

if __name__ == "__main__":
    cli()
