# roxy:header:start
#
#   project      : Roxy
#   file         : engine.py
#   file_relpath : src/roxy/engine.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Execution helpers for running a pipeline over assets (engine layer).

This module provides CLI-free functions shared by the public API and the CLI:

- `process`: one asset. Read it fully, run the pipeline, write the result.
  Failures propagate to the caller as typed exceptions and nothing is written
  unless the whole chain succeeded.
- `process_many`: many assets, independently. Failures are logged, the batch
  continues, and the first failure is summarized as an `ExitCode`.
- `build_tree`: discover assets under a source root, map them to output paths,
  and run `process_many` with one shared pipeline.

Design goals:
  - No CLI dependencies: do not import Click or anything under ``roxy.cli``.
  - The context identifier passed to the pipeline is the *output* locator: the
    template step keys its registry and chooses autoescaping from it.
  - Sequential execution. A batch shares one pipeline, so the template step's
    registry accumulates one template per output path.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from roxy.assets import resolve_locator, select_sink, select_source
from roxy.config.logging import get_logger
from roxy.core.errors import InvalidLocatorError, TransformError
from roxy.core.exit_codes import ExitCode
from roxy.pipeline.pipelines import build_pipeline

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from roxy.assets import AssetSource, Locator, WriteSink
    from roxy.config import Config
    from roxy.config.logging import RoxyLogger
    from roxy.pipeline import Pipeline

logger: RoxyLogger = get_logger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of processing one asset.

    Attributes:
        input_path (str): Resolved input locator.
        output_path (str): Resolved output locator (also the context identifier).
        bytes_read (int): Size of the asset content.
        bytes_written (int): Bytes written by the sink (0 for dry runs).
    """

    input_path: str
    output_path: str
    bytes_read: int
    bytes_written: int


def process(
    input_locator: Locator,
    output_locator: Locator,
    pipeline: Pipeline,
    *,
    source: AssetSource | None = None,
    sink: WriteSink | None = None,
    dry_run: bool = False,
) -> ProcessResult:
    """Load one asset, run ``pipeline`` over it, and write the result.

    Args:
        input_locator (Locator): Asset to read (``-`` for standard input).
        output_locator (Locator): Destination (``-`` for standard output). Its text
            form is the context identifier of the pipeline run.
        pipeline (Pipeline): The transformation chain.
        source (AssetSource | None): Source override (default: chosen from the locator).
        sink (WriteSink | None): Sink override (default: chosen from the locator).
        dry_run (bool): Run the pipeline but write nothing (ignored when ``sink`` is given).

    Returns:
        ProcessResult: Paths and byte counts.

    Raises:
        InvalidLocatorError: If a locator cannot be represented as text (before any I/O).
        OSError: If the asset cannot be read or the destination cannot be written.
        TransformError: If a step fails; the destination is then left untouched.
    """
    input_path: str = resolve_locator(input_locator)
    output_path: str = resolve_locator(output_locator)

    src: AssetSource = source or select_source(input_path)
    with src.open(input_path) as asset:
        data: bytes = asset.read()
    logger.debug("Read %d bytes from %s", len(data), input_path)

    result: bytes = pipeline.run(output_path, data)

    dst: WriteSink = sink or select_sink(output_path, dry_run=dry_run)
    dst.ensure_parent_dirs(output_path)
    written: int = dst.create_and_write(output_path, result)
    logger.info("Processed %s -> %s (%d bytes)", input_path, output_path, written)

    return ProcessResult(
        input_path=input_path,
        output_path=output_path,
        bytes_read=len(data),
        bytes_written=written,
    )


def exit_code_for(exc: BaseException) -> ExitCode:
    """Map an exception raised by `process` to an `ExitCode`.

    Args:
        exc (BaseException): The exception.

    Returns:
        ExitCode: The matching exit code (``UNEXPECTED_ERROR`` when unknown).
    """
    if isinstance(exc, TransformError):
        return ExitCode.TRANSFORM_ERROR
    if isinstance(exc, InvalidLocatorError):
        return ExitCode.INVALID_LOCATOR
    if isinstance(exc, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ExitCode.PERMISSION_DENIED
    if isinstance(exc, OSError):
        return ExitCode.IO_ERROR
    return ExitCode.UNEXPECTED_ERROR


@dataclass(frozen=True)
class BatchFailure:
    """One failed asset of a batch.

    Attributes:
        input_path (str): The asset that failed (as supplied).
        output_path (str): Its intended destination (as supplied).
        exit_code (ExitCode): Classification of the failure.
        message (str): Human-readable cause.
    """

    input_path: str
    output_path: str
    exit_code: ExitCode
    message: str


def process_many(
    pairs: Iterable[tuple[Locator, Locator]],
    pipeline: Pipeline,
    *,
    dry_run: bool = False,
) -> tuple[list[ProcessResult], list[BatchFailure], ExitCode | None]:
    """Process each ``(input, output)`` pair independently with one pipeline.

    Failures of one asset do not stop the batch. Only the *first* failure's exit
    code is returned (a conventional behavior for batch tools).

    Args:
        pairs (Iterable[tuple[Locator, Locator]]): Input/output locator pairs.
        pipeline (Pipeline): Pipeline shared by every asset, run sequentially.
        dry_run (bool): Run the pipeline but write nothing.

    Returns:
        tuple[list[ProcessResult], list[BatchFailure], ExitCode | None]: Successful
        results in order, failures in order, and the first failure's exit code
        (``None`` when everything succeeded).
    """
    results: list[ProcessResult] = []
    failures: list[BatchFailure] = []
    encountered_error_code: ExitCode | None = None

    for input_locator, output_locator in pairs:
        try:
            results.append(process(input_locator, output_locator, pipeline, dry_run=dry_run))
        except (InvalidLocatorError, TransformError, OSError) as exc:
            code: ExitCode = exit_code_for(exc)
            logger.error("Failed to process %s: %s", input_locator, exc)
            failures.append(
                BatchFailure(
                    input_path=str(input_locator),
                    output_path=str(output_locator),
                    exit_code=code,
                    message=str(exc),
                )
            )
            encountered_error_code = encountered_error_code or code

    return results, failures, encountered_error_code


def discover_assets(
    source_root: Path,
    include: Sequence[str],
    exclude: Sequence[str] = (),
) -> list[Path]:
    """Return the files under ``source_root`` selected by the patterns, sorted.

    Patterns use gitignore (``gitwildmatch``) semantics and are matched against
    the POSIX path relative to ``source_root``: ``*.md`` matches at any depth,
    ``/index.md`` only at the root, ``drafts/`` a whole directory.

    Args:
        source_root (Path): Root directory of the source tree.
        include (Sequence[str]): A file is selected if it matches any of these.
        exclude (Sequence[str]): A selected file is dropped if it matches any of these.

    Returns:
        list[Path]: Matching files, sorted.

    Raises:
        FileNotFoundError: If ``source_root`` is not a directory.
    """
    if not source_root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {source_root}")
    include_spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(include))
    exclude_spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(exclude))

    found: list[Path] = []
    for path in source_root.rglob("*"):
        if not path.is_file():
            continue
        rel: str = path.relative_to(source_root).as_posix()
        if include_spec.match_file(rel) and not exclude_spec.match_file(rel):
            found.append(path)
    logger.trace("Discovered %d asset(s) under %s", len(found), source_root)
    return sorted(found)


def output_path_for(
    source_root: Path,
    output_root: Path,
    asset_path: Path,
    extension: str,
) -> Path:
    """Map an asset of the source tree to its place in the output tree.

    ``content/blog/post.md`` becomes ``public/blog/post.html`` for
    ``source_root=content``, ``output_root=public`` and ``extension=".html"``.

    Args:
        source_root (Path): Root of the source tree.
        output_root (Path): Root of the output tree.
        asset_path (Path): An asset under ``source_root``.
        extension (str): New extension (``""`` keeps the original one).

    Returns:
        Path: The output path.
    """
    relative: Path = asset_path.relative_to(source_root)
    if extension:
        relative = relative.with_suffix(extension)
    return output_root / relative


def build_tree(
    config: Config,
    pipeline: Pipeline | None = None,
) -> tuple[list[ProcessResult], list[BatchFailure], ExitCode | None]:
    """Build every asset of ``config.source`` into ``config.output``.

    Args:
        config (Config): Configuration snapshot (build paths, patterns, steps).
        pipeline (Pipeline | None): Pipeline to use (default: built from ``config``).

    Returns:
        tuple[list[ProcessResult], list[BatchFailure], ExitCode | None]: See `process_many`.

    Raises:
        FileNotFoundError: If the source directory does not exist.
        ConfigError: If the configured pipeline names an unknown step.
    """
    chain: Pipeline = pipeline if pipeline is not None else build_pipeline(config)
    assets: list[Path] = discover_assets(config.source, config.include, config.exclude)
    logger.info("Building %d asset(s) from %s into %s", len(assets), config.source, config.output)
    pairs: list[tuple[Locator, Locator]] = [
        (asset, output_path_for(config.source, config.output, asset, config.extension))
        for asset in assets
    ]
    return process_many(pairs, chain, dry_run=config.dry_run)
