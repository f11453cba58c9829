# roxy:header:start
#
#   project      : Roxy
#   file         : model.py
#   file_relpath : src/roxy/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot consumed by the engine and the
      pipeline factory.
    - `MutableConfig`: a mutable builder used while layering defaults, the
      configuration file and CLI overrides; it can be frozen into `Config` and
      thawed back for edits.

Layering (lowest to highest precedence):
    1. runtime defaults (`roxy.config.io.load_defaults_dict`)
    2. ``roxy.toml`` or ``[tool.roxy]`` in ``pyproject.toml`` (or ``--config PATH``)
    3. CLI arguments

Builder fields set to ``None`` mean "inherit from the lower layer". The
``[context]`` binding set is merged key by key.

Path semantics:
    - ``[build] source`` and ``output`` declared in a config file are resolved
      against that file's directory.
    - CLI paths are kept as given (relative to the invocation CWD).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from roxy.config.io import (
    extract_pyproject_table,
    get_bool_value_or_none,
    get_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from roxy.config.keys import Toml
from roxy.config.logging import get_logger

if TYPE_CHECKING:
    from roxy.config.io import TomlTable
    from roxy.config.logging import RoxyLogger

logger: RoxyLogger = get_logger(__name__)

CONFIG_FILE_NAME: Final[str] = "roxy.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

# ArgsLike: generic mapping accepted by `MutableConfig.apply_cli_args`
# (works for Click parameter dicts and API/test dicts alike).
ArgsLike = Mapping[str, Any]


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Roxy.

    Attributes:
        config_files (tuple[Path, ...]): Configuration files merged into this snapshot.
        steps (tuple[str, ...]): Pipeline step names, in execution order.
        markdown_extensions (tuple[str, ...]): Python-Markdown extension names.
        template_strict (bool): Whether undefined template bindings are errors.
        autoescape (tuple[str, ...]): Output extensions with HTML autoescaping.
        context (Mapping[str, Any]): Binding set for the template step.
        source (Path): Root of the source tree for ``build``.
        output (Path): Root of the output tree for ``build``.
        include (tuple[str, ...]): Gitignore-style patterns selecting assets under ``source``.
        exclude (tuple[str, ...]): Gitignore-style patterns removing assets from the selection.
        extension (str): Extension given to built outputs (e.g. ``".html"``).
        dry_run (bool): Run the pipeline but do not write any output.
    """

    config_files: tuple[Path, ...]
    steps: tuple[str, ...]
    markdown_extensions: tuple[str, ...]
    template_strict: bool
    autoescape: tuple[str, ...]
    context: Mapping[str, Any]
    source: Path
    output: Path
    include: tuple[str, ...]
    exclude: tuple[str, ...]
    extension: str
    dry_run: bool

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            config_files=list(self.config_files),
            steps=list(self.steps),
            markdown_extensions=list(self.markdown_extensions),
            template_strict=self.template_strict,
            autoescape=list(self.autoescape),
            context=dict(self.context),
            source=self.source,
            output=self.output,
            include=list(self.include),
            exclude=list(self.exclude),
            extension=self.extension,
            dry_run=self.dry_run,
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this snapshot into a TOML-serializable dict (same schema as ``roxy.toml``)."""
        return {
            Toml.SECTION_PIPELINE: {Toml.KEY_STEPS: list(self.steps)},
            Toml.SECTION_MARKDOWN: {Toml.KEY_EXTENSIONS: list(self.markdown_extensions)},
            Toml.SECTION_TEMPLATE: {
                Toml.KEY_STRICT: self.template_strict,
                Toml.KEY_AUTOESCAPE: list(self.autoescape),
            },
            Toml.SECTION_CONTEXT: dict(self.context),
            Toml.SECTION_BUILD: {
                Toml.KEY_SOURCE: self.source.as_posix(),
                Toml.KEY_OUTPUT: self.output.as_posix(),
                Toml.KEY_INCLUDE: list(self.include),
                Toml.KEY_EXCLUDE: list(self.exclude),
                Toml.KEY_EXTENSION: self.extension,
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` means "not set at this layer". Use `merge_with` to layer builders and
    `freeze` to obtain a `Config`.
    """

    config_files: list[Path] = field(default_factory=lambda: [])
    steps: list[str] | None = None
    markdown_extensions: list[str] | None = None
    template_strict: bool | None = None
    autoescape: list[str] | None = None
    context: dict[str, Any] = field(default_factory=lambda: {})
    source: Path | None = None
    output: Path | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    extension: str | None = None
    dry_run: bool | None = None

    # --- Construction ---

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with Roxy's runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a layer from a parsed ``roxy.toml``-shaped dict.

        Args:
            data (TomlTable): Parsed TOML content.
            config_file (Path | None): File the content came from; relative build
                paths are resolved against its directory.

        Returns:
            MutableConfig: A builder holding only the keys present in ``data``.
        """
        base: Path | None = config_file.parent if config_file is not None else None

        def _path(value: str | None) -> Path | None:
            if value is None:
                return None
            p = Path(value)
            return base / p if base is not None and not p.is_absolute() else p

        pipeline_tbl: TomlTable = get_table_value(data, Toml.SECTION_PIPELINE)
        markdown_tbl: TomlTable = get_table_value(data, Toml.SECTION_MARKDOWN)
        template_tbl: TomlTable = get_table_value(data, Toml.SECTION_TEMPLATE)
        build_tbl: TomlTable = get_table_value(data, Toml.SECTION_BUILD)

        known: set[str] = {
            Toml.SECTION_PIPELINE,
            Toml.SECTION_MARKDOWN,
            Toml.SECTION_TEMPLATE,
            Toml.SECTION_CONTEXT,
            Toml.SECTION_BUILD,
        }
        for key in data:
            if key not in known:
                logger.warning("Unknown configuration section [%s] in %s", key, config_file)

        return cls(
            config_files=[config_file] if config_file is not None else [],
            steps=get_list_value_or_none(pipeline_tbl, Toml.KEY_STEPS),
            markdown_extensions=get_list_value_or_none(markdown_tbl, Toml.KEY_EXTENSIONS),
            template_strict=get_bool_value_or_none(template_tbl, Toml.KEY_STRICT),
            autoescape=get_list_value_or_none(template_tbl, Toml.KEY_AUTOESCAPE),
            context=dict(get_table_value(data, Toml.SECTION_CONTEXT)),
            source=_path(get_string_value_or_none(build_tbl, Toml.KEY_SOURCE)),
            output=_path(get_string_value_or_none(build_tbl, Toml.KEY_OUTPUT)),
            include=get_list_value_or_none(build_tbl, Toml.KEY_INCLUDE),
            exclude=get_list_value_or_none(build_tbl, Toml.KEY_EXCLUDE),
            extension=get_string_value_or_none(build_tbl, Toml.KEY_EXTENSION),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from ``roxy.toml`` or from ``[tool.roxy]`` in ``pyproject.toml``.

        Args:
            path (Path): Configuration file path.

        Returns:
            MutableConfig | None: The layer, or ``None`` for a ``pyproject.toml``
            without a ``[tool.roxy]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            table: TomlTable | None = extract_pyproject_table(data)
            if table is None:
                logger.debug("No [tool.roxy] table in %s", path)
                return None
            data = table
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Find the configuration file that applies to ``start``.

        ``roxy.toml`` wins over ``pyproject.toml``; only ``start`` itself is
        searched (no walking up the tree).

        Args:
            start (Path): Directory to search.

        Returns:
            Path | None: The configuration file, or ``None``.
        """
        candidate: Path = start / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        candidate = start / PYPROJECT_FILE_NAME
        if candidate.is_file() and extract_pyproject_table(load_toml_dict(candidate)) is not None:
            return candidate
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        start: Path | None = None,
    ) -> MutableConfig:
        """Return defaults layered with the explicit or discovered configuration file.

        Args:
            config_file (Path | None): Explicit configuration file (``--config``).
            start (Path | None): Directory for discovery when ``config_file`` is
                not given (default: the current working directory).

        Returns:
            MutableConfig: The merged builder.

        Raises:
            ConfigError: If the configuration file cannot be read or parsed.
        """
        merged: MutableConfig = cls.from_defaults()
        path: Path | None = config_file or cls.discover_config_file(start or Path.cwd())
        if path is None:
            logger.debug("No configuration file found; using defaults")
            return merged
        layer: MutableConfig | None = cls.from_toml_file(path)
        if layer is not None:
            logger.info("Using configuration file %s", path)
            merged = merged.merge_with(layer)
        return merged

    # --- Merging ---

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Layer ``other`` on top of ``self`` (``other`` wins for every set field).

        Args:
            other (MutableConfig): Higher-precedence layer.

        Returns:
            MutableConfig: ``self``, updated in place.
        """
        self.config_files.extend(other.config_files)
        self.context.update(other.context)
        for name in (
            "steps",
            "markdown_extensions",
            "template_strict",
            "autoescape",
            "source",
            "output",
            "include",
            "exclude",
            "extension",
            "dry_run",
        ):
            value: Any = getattr(other, name)
            if value is not None:
                setattr(self, name, value)
        return self

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides.

        Recognized keys: ``steps`` (sequence of step names; empty means "keep"),
        ``vars`` (mapping merged into ``context``), ``source``, ``output``,
        ``dry_run``. ``None`` values are ignored.

        Args:
            args (ArgsLike): Parsed CLI arguments.

        Returns:
            MutableConfig: ``self``, updated in place.
        """
        steps: Any = args.get("steps")
        if steps:
            self.steps = list(steps)
        variables: Any = args.get("vars")
        if variables:
            self.context.update(variables)
        if args.get("source") is not None:
            self.source = Path(args["source"])
        if args.get("output") is not None:
            self.output = Path(args["output"])
        if args.get("dry_run") is not None:
            self.dry_run = bool(args["dry_run"])
        return self

    # --- Freezing ---

    def freeze(self) -> Config:
        """Return an immutable `Config`; unset fields fall back to runtime defaults."""
        full: MutableConfig = MutableConfig.from_defaults().merge_with(self)
        assert full.steps is not None
        assert full.markdown_extensions is not None
        assert full.template_strict is not None
        assert full.autoescape is not None
        assert full.source is not None and full.output is not None
        assert full.include is not None and full.extension is not None
        assert full.exclude is not None
        extension: str = full.extension
        if extension and not extension.startswith("."):
            extension = f".{extension}"
        return Config(
            config_files=tuple(full.config_files),
            steps=tuple(full.steps),
            markdown_extensions=tuple(full.markdown_extensions),
            template_strict=full.template_strict,
            autoescape=tuple(ext.lstrip(".").lower() for ext in full.autoescape),
            context=MappingProxyType(dict(full.context)),
            source=full.source,
            output=full.output,
            include=tuple(full.include),
            exclude=tuple(full.exclude),
            extension=extension,
            dry_run=bool(full.dry_run),
        )
