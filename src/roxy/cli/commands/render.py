# roxy:header:start
#
#   project      : Roxy
#   file         : render.py
#   file_relpath : src/roxy/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Roxy `render` command.

Runs the configured pipeline over a single asset:

    roxy render content/index.md public/index.html --var title=Home

``-`` as INPUT reads standard input; ``-`` as OUTPUT writes the rendered bytes
to standard output. The OUTPUT locator doubles as the template name, so its
extension decides whether template autoescaping is enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roxy.cli.cmd_common import build_config_common, get_effective_verbosity
from roxy.cli.errors import cli_error_for
from roxy.cli.options import common_config_options, step_option
from roxy.config.logging import get_logger
from roxy.constants import STDIO_LOCATOR
from roxy.core.errors import ConfigError, InvalidLocatorError, TransformError
from roxy.engine import process
from roxy.pipeline.pipelines import build_pipeline

if TYPE_CHECKING:
    from pathlib import Path

    from roxy.cli.console import ClickConsole
    from roxy.config import Config
    from roxy.config.logging import RoxyLogger
    from roxy.engine import ProcessResult
    from roxy.pipeline import Pipeline

logger: RoxyLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render one asset (INPUT) into OUTPUT; use '-' for standard input/output.",
)
@click.argument("input_locator", metavar="INPUT", type=str)
@click.argument("output_locator", metavar="OUTPUT", type=str)
@step_option
@common_config_options
def render_command(
    *,
    input_locator: str,
    output_locator: str,
    steps: tuple[str, ...],
    config_file: Path | None,
    variables: tuple[tuple[str, str], ...],
    dry_run: bool | None,
) -> None:
    """Render a single asset through the pipeline.

    Args:
        input_locator (str): Asset to read (``-`` for standard input).
        output_locator (str): Destination and template name (``-`` for standard output).
        steps (tuple[str, ...]): ``--step`` overrides, in order.
        config_file (Path | None): Explicit configuration file.
        variables (tuple[tuple[str, str], ...]): ``--var`` template bindings.
        dry_run (bool | None): If set, run the pipeline without writing.
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
    try:
        pipeline: Pipeline = build_pipeline(config)
        result: ProcessResult = process(
            input_locator, output_locator, pipeline, dry_run=config.dry_run
        )
    except (ConfigError, InvalidLocatorError, TransformError, OSError) as exc:
        raise cli_error_for(exc) from exc

    # Standard output carries the rendered bytes; keep it clean.
    if result.output_path == STDIO_LOCATOR and not config.dry_run:
        return
    if config.dry_run:
        console.print(
            f"{console.styled('would render', fg='yellow')} "
            f"{result.input_path} -> {result.output_path}"
        )
    elif get_effective_verbosity(ctx) >= 0:
        console.print(
            f"{console.styled('rendered', fg='green')} "
            f"{result.input_path} -> {result.output_path} ({result.bytes_written} bytes)"
        )
