# roxy:header:start
#
#   project      : Roxy
#   file         : config.py
#   file_relpath : src/roxy/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Roxy `config` command.

Emits the effective Roxy configuration as TOML after applying defaults, the
explicit or discovered configuration file, and any CLI overrides. The output is
wrapped between `# === BEGIN ===` and `# === END ===` markers for easy parsing
in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roxy.cli.cmd_common import build_config_common
from roxy.cli.options import common_config_options, step_option
from roxy.config.io import to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from roxy.cli.console import ClickConsole
    from roxy.config import Config


@click.command(
    name="config",
    help="Dump the final merged Roxy configuration as TOML.",
)
@step_option
@common_config_options
def config_command(
    *,
    steps: tuple[str, ...],
    config_file: Path | None,
    variables: tuple[tuple[str, str], ...],
    dry_run: bool | None,
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        steps (tuple[str, ...]): ``--step`` overrides, in order.
        config_file (Path | None): Explicit configuration file.
        variables (tuple[tuple[str, str], ...]): ``--var`` template bindings.
        dry_run (bool | None): ``--dry-run`` flag (recorded in the dump).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: Config = build_config_common(
        config_file=config_file,
        steps=steps,
        variables=variables,
        dry_run=dry_run,
    )
    console.print("# === BEGIN ===")
    console.print(to_toml(config.to_toml_dict()), nl=False)
    console.print("# === END ===")
