# roxy:header:start
#
#   project      : Roxy
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Shared test steps for pipeline tests.

These small `BaseTransform` subclasses make pipeline behavior observable
without depending on the Markdown or template engines:

  * `RecordingTransform`: copies its input and records every call.
  * `AppendTransform`: appends a fixed suffix (order-sensitive).
  * `FailingTransform`: raises `TransformError` (or any other exception).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roxy.core.errors import TransformError
from roxy.pipeline.transforms import BaseTransform

if TYPE_CHECKING:
    from roxy.pipeline.contracts import BytesLike


class RecordingTransform(BaseTransform):
    """Pass-through step recording ``(context_id, input bytes)`` per call."""

    def __init__(self, name: str = "record") -> None:
        super().__init__(name=name)
        self.calls: list[tuple[str, bytes]] = []

    def run(self, context_id: str, data: BytesLike, output: bytearray) -> None:
        self.calls.append((context_id, bytes(data)))
        output += data


class AppendTransform(BaseTransform):
    """Step appending ``suffix`` to its input."""

    def __init__(self, suffix: bytes, name: str = "append") -> None:
        super().__init__(name=name)
        self.suffix = suffix

    def run(self, context_id: str, data: BytesLike, output: bytearray) -> None:
        output += data
        output += self.suffix


class FailingTransform(BaseTransform):
    """Step that always fails, after writing partial output."""

    def __init__(self, exc: Exception | None = None, name: str = "failing") -> None:
        super().__init__(name=name)
        self.exc: Exception = exc or TransformError("boom")

    def run(self, context_id: str, data: BytesLike, output: bytearray) -> None:
        output += b"partial"
        raise self.exc
