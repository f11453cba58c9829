# roxy:header:start
#
#   project      : Roxy
#   file         : markdown.py
#   file_relpath : src/roxy/pipeline/transforms/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Markdown to HTML transformation step.

The grammar itself is delegated to Python-Markdown. This step only owns the
byte/text boundary: input is decoded as UTF-8 with replacement markers (a damaged
byte sequence is repaired, never rejected) and the HTML is encoded back to UTF-8.

Non-empty output always ends with a newline so the last block is terminated like
every other block (``# Title`` becomes ``<h1>Title</h1>\\n``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import markdown

from roxy.config.logging import get_logger
from roxy.core.errors import TransformError
from roxy.pipeline.transforms.base import BaseTransform, decode_text, encode_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from roxy.config.logging import RoxyLogger
    from roxy.pipeline.contracts import BytesLike

logger: RoxyLogger = get_logger(__name__)


class MarkdownTransform(BaseTransform):
    """Convert Markdown bytes to HTML bytes.

    The step is effectively stateless: the converter state is reset before every
    conversion. ``context_id`` is accepted but unused.

    Args:
        extensions (Iterable[str]): Python-Markdown extension names
            (e.g. ``"tables"``, ``"fenced_code"``).
    """

    def __init__(self, extensions: Iterable[str] = ()) -> None:
        super().__init__(name="markdown")
        self.extensions: tuple[str, ...] = tuple(extensions)
        try:
            self._md = markdown.Markdown(extensions=list(self.extensions))
        except (ImportError, AttributeError, TypeError) as exc:
            raise TransformError(
                f"cannot load Markdown extensions {list(self.extensions)}: {exc}",
                step=self.name,
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(extensions={self.extensions!r})"

    def run(self, context_id: str, data: BytesLike, output: bytearray) -> None:
        """Render ``data`` as HTML and append it to ``output``.

        Args:
            context_id (str): Identifier of the current run (unused).
            data (BytesLike): Markdown source bytes.
            output (bytearray): Buffer receiving the HTML bytes.

        Raises:
            TransformError: If the Markdown engine fails (not expected for any input).
        """
        text: str = decode_text(data)
        try:
            html: str = self._md.reset().convert(text)
        except Exception as exc:  # pragma: no cover - Python-Markdown is total over str
            raise TransformError(str(exc), step=self.name, context_id=context_id) from exc

        if html and not html.endswith("\n"):
            html += "\n"
        output += encode_text(html)
