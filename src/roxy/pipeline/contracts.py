# roxy:header:start
#
#   project      : Roxy
#   file         : contracts.py
#   file_relpath : src/roxy/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Type contracts for pipeline steps (engine-facing).

This module defines the minimal protocol that every transformation step must
implement. The pipeline invokes steps as ``step.apply_into(context_id, data, output)``.

Lifecycle
---------
1) The pipeline clears ``output``.
2) It calls ``step.apply_into(context_id, data, output)``; the step appends its
   result to ``output``.
3) On success the pipeline swaps buffers so ``output`` becomes the next step's
   ``data``. On failure (`TransformError`) the run stops.

The context identifier
----------------------
``context_id`` is an opaque string threaded unchanged through every step of one
run. It does double duty: it names the asset in logs and error messages, and it
is the key stateful steps use to register per-run artifacts (the template step
registers the template body under it, and derives autoescaping from its
extension). It is conventionally the *output* path, not the input path.
"""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

#: Bytes-like input accepted by steps. The pipeline passes read-only `memoryview`s.
BytesLike = Union[bytes, bytearray, memoryview]


@runtime_checkable
class Transform(Protocol):
    """Protocol for a single transformation step.

    Implementations typically subclass
    [`roxy.pipeline.transforms.base.BaseTransform`][].
    """

    name: str

    def apply_into(self, context_id: str, data: BytesLike, output: bytearray) -> None:
        """Transform ``data`` and append the result to ``output``.

        Implementations must not mutate ``data`` (it is owned by the caller) and
        must confine side effects to their own state. Malformed input is reported
        by raising `TransformError`, never by exiting the process.

        Args:
            context_id (str): Identifier of the current run (see module docstring).
            data (BytesLike): Input bytes; a read-only view when called by the pipeline.
            output (bytearray): Cleared buffer receiving the step's result.
        """
        ...

    def apply(self, context_id: str, data: BytesLike) -> bytes:
        """Transform ``data`` and return the result as a new ``bytes`` object.

        Args:
            context_id (str): Identifier of the current run.
            data (BytesLike): Input bytes.

        Returns:
            bytes: The transformed bytes.
        """
        ...
