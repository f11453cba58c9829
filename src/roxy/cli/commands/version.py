# roxy:header:start
#
#   project      : Roxy
#   file         : version.py
#   file_relpath : src/roxy/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Roxy `version` command.

Prints the current Roxy version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roxy.cli.cmd_common import get_effective_verbosity
from roxy.constants import ROXY_VERSION

if TYPE_CHECKING:
    from roxy.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Roxy.",
)
def version_command() -> None:
    """Show the current version of Roxy."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Roxy version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(ROXY_VERSION, bold=True)}")
    else:
        console.print(console.styled(ROXY_VERSION, bold=True))
