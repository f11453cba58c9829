# roxy:header:start
#
#   project      : Roxy
#   file         : template.py
#   file_relpath : src/roxy/pipeline/transforms/template.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""HTML template rendering step.

Each invocation treats its input as one template body and:

1. registers (or overwrites) the body under ``context_id`` in the instance registry;
2. renders it against the binding set fixed at construction;
3. appends the rendered UTF-8 bytes to the output buffer.

The template language is Jinja2. Every instance owns its own `jinja2.Environment`
whose `jinja2.DictLoader` is backed by the instance registry, so there is no
process-global template state.

Registry semantics
------------------
The registry persists across invocations on the same instance. Re-using one
instance for many assets accumulates one template per context identifier, and a
collision silently replaces the earlier body (last write wins). A body that fails
to compile is not registered: the previous body under that identifier, if any,
stays in place.

Autoescaping is chosen from the extension of ``context_id`` (``.html``, ``.htm``
and ``.xml`` by default), which is why callers pass the *destination* path as the
identifier.

Thread safety
-------------
Registration and rendering are not safe to interleave. Callers sharing one
instance across threads must hold `TemplateTransform.lock` around each call;
``apply_into()`` does not take it.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    TemplateSyntaxError,
    Undefined,
    select_autoescape,
)

from roxy.config.logging import get_logger
from roxy.core.errors import TransformError
from roxy.pipeline.transforms.base import BaseTransform, decode_text, encode_text

if TYPE_CHECKING:
    from jinja2 import Template

    from roxy.config.logging import RoxyLogger
    from roxy.pipeline.contracts import BytesLike

logger: RoxyLogger = get_logger(__name__)

DEFAULT_AUTOESCAPE_EXTENSIONS: Final[tuple[str, ...]] = ("html", "htm", "xml")


class TemplateTransform(BaseTransform):
    """Render the input as a Jinja2 template against a fixed binding set.

    Args:
        bindings (Mapping[str, Any] | None): Variable name to value mapping used for
            every render. Copied at construction.
        strict (bool): If True (default), referencing an undefined binding is an
            error; otherwise it renders as an empty string.
        autoescape_extensions (Iterable[str]): Context identifier extensions for
            which HTML autoescaping is enabled.

    Attributes:
        bindings (Mapping[str, Any]): Read-only view of the binding set.
        environment (jinja2.Environment): The instance-owned template environment.
        lock (threading.Lock): Guard for callers sharing this instance across threads.
    """

    def __init__(
        self,
        bindings: Mapping[str, Any] | None = None,
        *,
        strict: bool = True,
        autoescape_extensions: Iterable[str] = DEFAULT_AUTOESCAPE_EXTENSIONS,
    ) -> None:
        super().__init__(name="template")
        self.bindings: Mapping[str, Any] = MappingProxyType(dict(bindings or {}))
        self.strict: bool = strict
        self._sources: dict[str, str] = {}
        self.environment: Environment = Environment(
            loader=DictLoader(self._sources),
            autoescape=select_autoescape(
                enabled_extensions=tuple(autoescape_extensions),
                disabled_extensions=(),
                default_for_string=False,
                default=False,
            ),
            undefined=StrictUndefined if strict else Undefined,
            keep_trailing_newline=True,
            auto_reload=True,
        )
        self.lock: threading.Lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bindings={sorted(self.bindings)!r}, "
            f"strict={self.strict!r}, registered={len(self._sources)})"
        )

    @property
    def registered(self) -> tuple[str, ...]:
        """Identifiers currently present in the registry, in registration order."""
        return tuple(self._sources)

    def source_of(self, context_id: str) -> str | None:
        """Return the template body registered under ``context_id``, if any."""
        return self._sources.get(context_id)

    def clear(self) -> None:
        """Drop every registered template."""
        self._sources.clear()
        if self.environment.cache is not None:
            self.environment.cache.clear()

    def register(self, context_id: str, source: str) -> Template:
        """Compile ``source`` and register it under ``context_id``.

        Args:
            context_id (str): Registry key (conventionally the destination path).
            source (str): Template body.

        Returns:
            jinja2.Template: The compiled template.

        Raises:
            TransformError: If the body has a syntax error. The registry is left as
                it was before the call.
        """
        previous: str | None = self._sources.get(context_id)
        if previous is not None and previous != source:
            logger.debug("template: overwriting registration for %r", context_id)
        self._sources[context_id] = source
        try:
            return self.environment.get_template(context_id)
        except TemplateSyntaxError as exc:
            if previous is None:
                del self._sources[context_id]
            else:
                self._sources[context_id] = previous
            raise TransformError(
                f"cannot register template {context_id!r}: {exc.message} (line {exc.lineno})",
                step=self.name,
                context_id=context_id,
            ) from exc

    def render(self, context_id: str) -> str:
        """Render the template registered under ``context_id`` with the binding set.

        Args:
            context_id (str): Registry key of a previously registered template.

        Returns:
            str: The rendered text.

        Raises:
            TransformError: If nothing is registered under ``context_id`` or the
                render fails (undefined binding, failing expression, ...).
        """
        if context_id not in self._sources:
            raise TransformError(
                f"no template registered under {context_id!r}",
                step=self.name,
                context_id=context_id,
            )
        try:
            template: Template = self.environment.get_template(context_id)
            return template.render(self.bindings)
        except Exception as exc:
            # Template expressions may raise anything (undefined names, 1/0, bad filters).
            raise TransformError(
                f"cannot render template {context_id!r}: {exc}",
                step=self.name,
                context_id=context_id,
            ) from exc

    def run(self, context_id: str, data: BytesLike, output: bytearray) -> None:
        """Register ``data`` under ``context_id``, render it, and append the result.

        Args:
            context_id (str): Registry key and autoescape selector.
            data (BytesLike): Template body bytes (decoded as lossy UTF-8).
            output (bytearray): Buffer receiving the rendered bytes.
        """
        self.register(context_id, decode_text(data))
        output += encode_text(self.render(context_id))
