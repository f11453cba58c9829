# roxy:header:start
#
#   project      : Roxy
#   file         : pipelines.py
#   file_relpath : src/roxy/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Named steps and pipeline assembly from configuration.

Configuration refers to steps by name (``[pipeline] steps = [...]``). This
module maps those names to factories and builds a fresh `Pipeline` whose steps
are configured from a `Config` snapshot.

Overview
--------
- ``markdown``: Markdown → HTML (``[markdown] extensions``)
- ``template``: Jinja2 rendering with the ``[context]`` binding set
  (``[template] strict``, ``[template] autoescape``)

The default chain is ``markdown → template``: template tags pass through the
Markdown step untouched and are then substituted inside the rendered HTML.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Final

from roxy.config.logging import get_logger
from roxy.core.errors import ConfigError, TransformError
from roxy.pipeline.pipeline import Pipeline
from roxy.pipeline.transforms import MarkdownTransform, TemplateTransform

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from roxy.config import Config
    from roxy.config.logging import RoxyLogger
    from roxy.pipeline.contracts import Transform

logger: RoxyLogger = get_logger(__name__)


class StepName(str, Enum):
    """Step names accepted in ``[pipeline] steps`` and ``--step``."""

    MARKDOWN = "markdown"
    TEMPLATE = "template"


StepFactory = Callable[["Config"], "Transform"]


def _make_markdown(config: Config) -> Transform:
    return MarkdownTransform(extensions=config.markdown_extensions)


def _make_template(config: Config) -> Transform:
    return TemplateTransform(
        config.context,
        strict=config.template_strict,
        autoescape_extensions=config.autoescape,
    )


STEP_FACTORIES: Final[Mapping[str, StepFactory]] = MappingProxyType(
    {
        StepName.MARKDOWN.value: _make_markdown,
        StepName.TEMPLATE.value: _make_template,
    }
)


def make_step(name: str, config: Config) -> Transform:
    """Instantiate the step registered under ``name``.

    Args:
        name (str): Step name (case-insensitive).
        config (Config): Configuration the step is built from.

    Returns:
        Transform: A new step instance.

    Raises:
        ConfigError: If ``name`` is not a known step or the step cannot be
            configured (e.g. an unknown Markdown extension).
    """
    factory: StepFactory | None = STEP_FACTORIES.get(name.strip().lower())
    if factory is None:
        known: str = ", ".join(sorted(STEP_FACTORIES))
        raise ConfigError(f"Unknown pipeline step {name!r} (known steps: {known})")
    try:
        return factory(config)
    except TransformError as exc:
        raise ConfigError(f"Cannot configure pipeline step {name!r}: {exc}") from exc


def build_pipeline(config: Config, steps: Iterable[str] | None = None) -> Pipeline:
    """Build a new pipeline from ``config``.

    Args:
        config (Config): Configuration snapshot.
        steps (Iterable[str] | None): Step names overriding ``config.steps``.

    Returns:
        Pipeline: A pipeline with freshly instantiated steps, in order.

    Raises:
        ConfigError: If a step name is unknown.
    """
    names: tuple[str, ...] = tuple(steps) if steps is not None else config.steps
    pipeline = Pipeline()
    for name in names:
        pipeline.push(make_step(name, config))
    logger.debug("Built pipeline %r", pipeline)
    return pipeline
