# roxy:header:start
#
#   project      : Roxy
#   file         : base.py
#   file_relpath : src/roxy/pipeline/transforms/base.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Base class for class-based transformation steps.

The pipeline invokes steps through ``apply_into()``. `BaseTransform` implements
the common lifecycle around the step-specific ``run()``:

    step.apply_into(context_id, data, output)  # internally: trace → run → trace

Design goals
------------
- Single place for per-step bookkeeping (tracing, byte counts).
- Steps only implement ``run()`` and report failures by raising `TransformError`.
- Shared text decoding policy: UTF-8 with replacement markers, never rejecting input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from roxy.config.logging import get_logger

if TYPE_CHECKING:
    from roxy.config.logging import RoxyLogger
    from roxy.pipeline.contracts import BytesLike

logger: RoxyLogger = get_logger(__name__)

TEXT_ENCODING: Final[str] = "utf-8"


def decode_text(data: BytesLike) -> str:
    """Decode ``data`` as UTF-8, replacing invalid sequences with U+FFFD.

    Args:
        data (BytesLike): Raw input bytes (bytes, bytearray or memoryview).

    Returns:
        str: The decoded text. Never raises for malformed byte sequences.
    """
    return str(data, TEXT_ENCODING, "replace")


def encode_text(text: str) -> bytes:
    """Encode ``text`` as UTF-8 for the output buffer."""
    return text.encode(TEXT_ENCODING)


@dataclass(eq=False)
class BaseTransform:
    """Reusable foundation for transformation steps.

    Subclass this to implement a concrete step by overriding ``run()``. Do not
    override ``apply_into()`` unless you need custom lifecycle behavior.

    Attributes:
        name (str): Stable step identifier for logs and error messages.
    """

    name: str

    def apply_into(self, context_id: str, data: BytesLike, output: bytearray) -> None:
        """Run the step lifecycle, appending the result to ``output``.

        Args:
            context_id (str): Identifier of the current run.
            data (BytesLike): Input bytes (not mutated).
            output (bytearray): Cleared buffer receiving the result.
        """
        logger.trace("%s: applying to %r (%d bytes in)", self.name, context_id, len(data))
        self.run(context_id, data, output)
        logger.trace("%s: produced %d bytes for %r", self.name, len(output), context_id)

    def apply(self, context_id: str, data: BytesLike) -> bytes:
        """Transform ``data`` into a freshly allocated ``bytes`` object.

        Args:
            context_id (str): Identifier of the current run.
            data (BytesLike): Input bytes.

        Returns:
            bytes: The transformed bytes.
        """
        output = bytearray()
        self.apply_into(context_id, data, output)
        return bytes(output)

    def run(self, context_id: str, data: BytesLike, output: bytearray) -> None:
        """Perform the step's work, appending the result to ``output``.

        Subclasses must implement this method.

        Args:
            context_id (str): Identifier of the current run.
            data (BytesLike): Input bytes.
            output (bytearray): Buffer receiving the result.

        Raises:
            NotImplementedError: When a subclass does not override this method.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement run()")
