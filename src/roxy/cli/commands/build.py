# roxy:header:start
#
#   project      : Roxy
#   file         : build.py
#   file_relpath : src/roxy/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Roxy `build` command.

Renders every asset of a source tree into an output tree:

    roxy build content public

SOURCE and OUTPUT default to ``[build] source`` and ``[build] output`` from the
configuration. Each asset is processed independently; the command exits with
the exit code of the first failure (if any) after the whole tree was visited.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from roxy.cli.cmd_common import build_config_common, get_effective_verbosity
from roxy.cli.errors import cli_error_for
from roxy.cli.options import common_config_options, step_option
from roxy.config.logging import get_logger
from roxy.core.errors import ConfigError
from roxy.engine import build_tree

if TYPE_CHECKING:
    from roxy.cli.console import ClickConsole
    from roxy.config import Config
    from roxy.config.logging import RoxyLogger
    from roxy.core.exit_codes import ExitCode
    from roxy.engine import BatchFailure, ProcessResult

logger: RoxyLogger = get_logger(__name__)


@click.command(
    name="build",
    help="Render every matching asset of SOURCE into the OUTPUT directory.",
)
@click.argument("source", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.argument("output", required=False, type=click.Path(file_okay=False, path_type=Path))
@step_option
@common_config_options
def build_command(
    *,
    source: Path | None,
    output: Path | None,
    steps: tuple[str, ...],
    config_file: Path | None,
    variables: tuple[tuple[str, str], ...],
    dry_run: bool | None,
) -> None:
    """Build a whole source tree.

    Args:
        source (Path | None): Source directory override.
        output (Path | None): Output directory override.
        steps (tuple[str, ...]): ``--step`` overrides, in order.
        config_file (Path | None): Explicit configuration file.
        variables (tuple[tuple[str, str], ...]): ``--var`` template bindings.
        dry_run (bool | None): If set, run the pipeline without writing.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config_common(
        config_file=config_file,
        steps=steps,
        variables=variables,
        source=source,
        output=output,
        dry_run=dry_run,
    )

    results: list[ProcessResult]
    failures: list[BatchFailure]
    encountered_error_code: ExitCode | None
    try:
        results, failures, encountered_error_code = build_tree(config)
    except (ConfigError, OSError) as exc:
        raise cli_error_for(exc) from exc

    verb: str = "would render" if config.dry_run else "rendered"
    if vlevel >= 0:
        for r in results:
            console.print(f"{console.styled(verb, fg='green')} {r.input_path} -> {r.output_path}")
    for f in failures:
        console.error(f"failed {f.input_path}: {f.message}")

    if vlevel >= 0:
        console.print(
            console.styled(
                f"{len(results)} asset(s) {verb}, {len(failures)} failed.",
                bold=True,
            )
        )

    if encountered_error_code is not None:
        ctx.exit(int(encountered_error_code))
