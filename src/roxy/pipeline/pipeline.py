# roxy:header:start
#
#   project      : Roxy
#   file         : pipeline.py
#   file_relpath : src/roxy/pipeline/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Ordered chain of transformation steps with buffer hand-off.

A `Pipeline` owns an ordered list of steps (insertion order is execution order)
and runs them sequentially over one in-memory asset.

Buffer protocol
---------------
Two ``bytearray`` buffers alternate between the "current input" and "current
output" roles so a run does not allocate a new buffer per step:

1. ``current`` starts as a copy of the input; ``scratch`` starts empty.
2. For each step: clear ``scratch``; call
   ``step.apply_into(context_id, view_of(current), scratch)``; swap the roles.
3. After the last step ``current`` holds the result.

Each step therefore sees exactly the previous step's output (or the original
input for the first step) and never stale bytes from two steps earlier. Steps
receive a read-only `memoryview`, released as soon as the step returns.

Failure semantics
-----------------
The first failing step aborts the run: later steps do not execute and the
caller's destination is not modified (the copy-out only happens after the whole
chain succeeded). Failures are raised as `TransformError`; the pipeline does not
log them, which is the caller's responsibility.

An empty pipeline is a pass-through: the result equals the input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roxy.config.logging import get_logger
from roxy.core.errors import TransformError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from roxy.config.logging import RoxyLogger
    from roxy.pipeline.contracts import BytesLike, Transform

logger: RoxyLogger = get_logger(__name__)


class Pipeline:
    """An ordered, caller-controlled sequence of transformation steps.

    The pipeline holds its steps for its whole lifetime but owns none of their
    internal state (e.g. a template registry lives on the template step).

    Args:
        steps (Iterable[Transform]): Initial steps, appended in order.
    """

    def __init__(self, steps: Iterable[Transform] = ()) -> None:
        self._steps: list[Transform] = []
        for step in steps:
            self.push(step)

    def __repr__(self) -> str:
        names = ", ".join(step.name for step in self._steps)
        return f"{type(self).__name__}([{names}])"

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Transform]:
        return iter(self._steps)

    @property
    def steps(self) -> tuple[Transform, ...]:
        """The steps in execution order."""
        return tuple(self._steps)

    def push(self, step: Transform) -> Pipeline:
        """Append ``step`` to the end of the chain.

        No compatibility check is made between adjacent steps: a step that
        cannot handle its input reports it at run time through `TransformError`.

        Args:
            step (Transform): The step to append.

        Returns:
            Pipeline: ``self``, so calls can be chained.
        """
        self._steps.append(step)
        return self

    def run(self, context_id: str, data: BytesLike) -> bytes:
        """Run every step over ``data`` and return the final bytes.

        Args:
            context_id (str): Identifier threaded unchanged through every step
                (conventionally the output path; also the template registry key).
            data (BytesLike): The asset's full content.

        Returns:
            bytes: The output of the last step, or ``data`` unchanged when the
            pipeline is empty.

        Raises:
            TransformError: If any step fails.
        """
        return bytes(self._execute(context_id, data))

    def run_into(self, context_id: str, data: BytesLike, destination: bytearray) -> None:
        """Run every step over ``data`` and append the result to ``destination``.

        ``destination`` is only touched once the whole chain has succeeded.

        Args:
            context_id (str): Identifier threaded unchanged through every step.
            data (BytesLike): The asset's full content.
            destination (bytearray): Caller-owned buffer receiving the result.

        Raises:
            TransformError: If any step fails; ``destination`` is then unchanged.
        """
        destination += self._execute(context_id, data)

    def _execute(self, context_id: str, data: BytesLike) -> bytearray:
        current = bytearray(data)
        scratch = bytearray()

        for index, step in enumerate(self._steps):
            scratch.clear()
            logger.debug(
                "Pipeline: step %d/%d %s on %r", index + 1, len(self._steps), step.name, context_id
            )
            view = memoryview(current).toreadonly()
            try:
                step.apply_into(context_id, view, scratch)
            except TransformError as exc:
                if exc.step is None:
                    exc.step = step.name
                if exc.context_id is None:
                    exc.context_id = context_id
                raise
            except Exception as exc:
                raise TransformError(
                    f"unexpected {type(exc).__name__}: {exc}",
                    step=step.name,
                    context_id=context_id,
                ) from exc
            finally:
                view.release()
            current, scratch = scratch, current

        return current
