# roxy:header:start
#
#   project      : Roxy
#   file         : assets.py
#   file_relpath : src/roxy/assets.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Asset sources and write sinks (I/O collaborators of the pipeline).

The pipeline itself only sees a context identifier and bytes. This module holds
the thin I/O layer around it:

Sources
-------
- `FileSystemSource`: opens a file for binary reading.
- `StdinSource`: exposes standard input as an asset named ``-``.

Sinks
-----
- `FileSystemSink`: creates missing parent directories, then writes the file.
- `StdoutSink`: writes the bytes to standard output.
- `NullSink`: dry-run; writes nothing.

Locators
--------
A locator is the ``str`` or path-like naming an asset or destination.
`resolve_locator` turns it into the text form used as the pipeline's context
identifier, and raises `InvalidLocatorError` before any I/O is attempted when
that is not possible. ``-`` selects the standard streams.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, TYPE_CHECKING, Protocol, Union

from roxy.config.logging import get_logger
from roxy.constants import STDIO_LOCATOR
from roxy.core.errors import InvalidLocatorError

if TYPE_CHECKING:
    from types import TracebackType

    from roxy.config.logging import RoxyLogger

logger: RoxyLogger = get_logger(__name__)

Locator = Union[str, "os.PathLike[str]", "os.PathLike[bytes]", bytes]


def resolve_locator(locator: Locator) -> str:
    """Return the text form of ``locator``.

    Args:
        locator (Locator): A ``str``, ``bytes`` or path-like object.

    Returns:
        str: The locator as text, unchanged otherwise (no normalization).

    Raises:
        InvalidLocatorError: If the locator is not path-like, is empty, contains a
            NUL character, or cannot be represented as UTF-8 text.
    """
    try:
        raw: str | bytes = os.fspath(locator)
    except TypeError as exc:
        raise InvalidLocatorError(
            locator, f"expected a str or path-like object, got {type(locator).__name__}"
        ) from exc

    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidLocatorError(locator, "path bytes are not valid UTF-8") from exc

    if not raw:
        raise InvalidLocatorError(locator, "path is empty")
    if "\x00" in raw:
        raise InvalidLocatorError(locator, "path contains a NUL character")
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError as exc:
        # Lone surrogates, e.g. from os.fsdecode() of undecodable file names.
        raise InvalidLocatorError(locator, "path cannot be represented as UTF-8 text") from exc
    return raw


# --- Sources ---


@dataclass
class Asset:
    """An identified readable source.

    Use as a context manager so the underlying stream is closed:

        with source.open("content/index.md") as asset:
            data = asset.read()

    Attributes:
        path (str): Identifying path of the asset.
        stream (IO[bytes]): Binary stream positioned at the start of the content.
        close_stream (bool): Whether closing the asset closes ``stream``
            (``False`` for standard input).
    """

    path: str
    stream: IO[bytes]
    close_stream: bool = True
    _consumed: bool = field(default=False, init=False, repr=False)

    def __enter__(self) -> Asset:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def read(self) -> bytes:
        """Read the asset to exhaustion. May be called once per asset.

        Returns:
            bytes: The full content.

        Raises:
            ValueError: If the asset was already read.
        """
        if self._consumed:
            raise ValueError(f"Asset {self.path!r} has already been read")
        self._consumed = True
        return self.stream.read()

    def close(self) -> None:
        """Close the underlying stream when the asset owns it."""
        if self.close_stream:
            self.stream.close()


class AssetSource(Protocol):
    """Protocol for asset sources."""

    def open(self, locator: str) -> Asset:
        """Open the asset named by ``locator``.

        Args:
            locator (str): Resolved locator (see `resolve_locator`).

        Returns:
            Asset: The opened asset.

        Raises:
            OSError: If the asset cannot be opened.
        """
        ...


class FileSystemSource:
    """Source reading assets from the filesystem."""

    def open(self, locator: str) -> Asset:  # noqa: D102 (documented on the protocol)
        stream: IO[bytes] = open(locator, "rb")  # noqa: SIM115 (closed by Asset)
        logger.debug("FileSystemSource: opened %s", locator)
        return Asset(path=locator, stream=stream)


class StdinSource:
    """Source exposing standard input as a single asset."""

    def open(self, locator: str) -> Asset:  # noqa: D102 (documented on the protocol)
        logger.debug("StdinSource: reading asset %r from standard input", locator)
        return Asset(path=locator, stream=sys.stdin.buffer, close_stream=False)


def select_source(locator: str) -> AssetSource:
    """Return `StdinSource` for ``-`` and `FileSystemSource` otherwise."""
    if locator == STDIO_LOCATOR:
        return StdinSource()
    return FileSystemSource()


# --- Sinks ---


class WriteSink(Protocol):
    """Protocol for destinations receiving the pipeline's final bytes."""

    def ensure_parent_dirs(self, locator: str) -> None:
        """Create whatever must exist before ``locator`` can be written.

        Args:
            locator (str): Resolved destination locator.

        Raises:
            OSError: If the parents cannot be created.
        """
        ...

    def create_and_write(self, locator: str, data: bytes) -> int:
        """Create (or truncate) the destination and write ``data``.

        Args:
            locator (str): Resolved destination locator.
            data (bytes): Final pipeline output.

        Returns:
            int: Number of bytes written.

        Raises:
            OSError: If the destination cannot be written.
        """
        ...


class FileSystemSink:
    """Sink writing to the filesystem, creating missing parent directories."""

    def ensure_parent_dirs(self, locator: str) -> None:  # noqa: D102
        parent: Path = Path(locator).parent
        if not parent.is_dir():
            logger.debug("FileSystemSink: creating directory %s", parent)
        parent.mkdir(parents=True, exist_ok=True)

    def create_and_write(self, locator: str, data: bytes) -> int:  # noqa: D102
        with open(locator, "wb") as f:
            f.write(data)
        logger.debug("FileSystemSink: wrote %d bytes to %s", len(data), locator)
        return len(data)


class StdoutSink:
    """Sink writing the bytes to standard output."""

    def ensure_parent_dirs(self, locator: str) -> None:  # noqa: D102
        return None

    def create_and_write(self, locator: str, data: bytes) -> int:  # noqa: D102
        out: IO[bytes] = sys.stdout.buffer
        out.write(data)
        out.flush()
        return len(data)


class NullSink:
    """Dry-run sink: does not write anything."""

    def ensure_parent_dirs(self, locator: str) -> None:  # noqa: D102
        return None

    def create_and_write(self, locator: str, data: bytes) -> int:  # noqa: D102
        logger.debug("NullSink: dry run, discarding %d bytes for %s", len(data), locator)
        return 0


def select_sink(locator: str, *, dry_run: bool = False) -> WriteSink:
    """Return the sink for ``locator``.

    Args:
        locator (str): Resolved destination locator.
        dry_run (bool): If True, always return a `NullSink`.

    Returns:
        WriteSink: ``NullSink`` for dry runs, ``StdoutSink`` for ``-``,
        otherwise ``FileSystemSink``.
    """
    if dry_run:
        return NullSink()
    if locator == STDIO_LOCATOR:
        return StdoutSink()
    return FileSystemSink()
