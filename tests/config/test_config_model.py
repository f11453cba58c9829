# roxy:header:start
#
#   project      : Roxy
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Tests for configuration layering: defaults, config files, and CLI overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from roxy.config import Config, MutableConfig
from roxy.core.errors import ConfigError
from tests.conftest import make_config, write_text


def test_defaults() -> None:
    config: Config = MutableConfig.from_defaults().freeze()

    assert config.steps == ("markdown", "template")
    assert config.markdown_extensions == ()
    assert config.template_strict is True
    assert config.autoescape == ("html", "htm", "xml")
    assert dict(config.context) == {}
    assert config.source == Path("content")
    assert config.output == Path("public")
    assert config.include == ("**/*.md",)
    assert config.exclude == ()
    assert config.extension == ".html"
    assert config.dry_run is False
    assert config.config_files == ()


def test_empty_builder_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == MutableConfig.from_defaults().freeze()


def test_config_is_immutable() -> None:
    config: Config = make_config()

    with pytest.raises(AttributeError):
        config.steps = ("template",)  # type: ignore[misc]
    with pytest.raises(TypeError):
        config.context["x"] = 1  # type: ignore[index]


def test_thaw_and_refreeze() -> None:
    config: Config = make_config(context={"a": "1"})

    draft: MutableConfig = config.thaw()
    draft.steps = ["template"]
    draft.context["b"] = "2"
    changed: Config = draft.freeze()

    assert changed.steps == ("template",)
    assert dict(changed.context) == {"a": "1", "b": "2"}
    # The original snapshot is unchanged.
    assert config.steps == ("markdown", "template")
    assert dict(config.context) == {"a": "1"}


def test_from_toml_file_reads_all_sections(tmp_path: Path) -> None:
    path: Path = write_text(
        tmp_path / "site" / "roxy.toml",
        """
[pipeline]
steps = ["template"]

[markdown]
extensions = ["tables"]

[template]
strict = false
autoescape = ["html"]

[context]
title = "My site"
year = 2025

[build]
source = "pages"
output = "/srv/www"
include = ["*.md", "*.markdown"]
exclude = ["drafts/"]
extension = "htm"
""",
    )

    layer = MutableConfig.from_toml_file(path)
    assert layer is not None
    config: Config = layer.freeze()

    assert config.config_files == (path,)
    assert config.steps == ("template",)
    assert config.markdown_extensions == ("tables",)
    assert config.template_strict is False
    assert config.autoescape == ("html",)
    assert dict(config.context) == {"title": "My site", "year": 2025}
    # Relative build paths are resolved against the config file's directory.
    assert config.source == tmp_path / "site" / "pages"
    assert config.output == Path("/srv/www")
    assert config.include == ("*.md", "*.markdown")
    assert config.exclude == ("drafts/",)
    assert config.extension == ".htm"


def test_wrongly_typed_values_fall_back_to_defaults(tmp_path: Path) -> None:
    path: Path = write_text(
        tmp_path / "roxy.toml",
        """
[pipeline]
steps = 3

[template]
strict = "yes"
""",
    )

    layer = MutableConfig.from_toml_file(path)
    assert layer is not None
    config: Config = layer.freeze()

    assert config.steps == ("markdown", "template")
    assert config.template_strict is True


def test_malformed_toml_is_a_config_error(tmp_path: Path) -> None:
    path: Path = write_text(tmp_path / "roxy.toml", "[pipeline\nsteps = ")

    with pytest.raises(ConfigError):
        MutableConfig.from_toml_file(path)


def test_pyproject_without_tool_table_is_ignored(tmp_path: Path) -> None:
    path: Path = write_text(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')

    assert MutableConfig.from_toml_file(path) is None
    assert MutableConfig.discover_config_file(tmp_path) is None


def test_discovery_prefers_roxy_toml(tmp_path: Path) -> None:
    write_text(tmp_path / "pyproject.toml", '[tool.roxy.context]\nwho = "pyproject"\n')
    assert MutableConfig.discover_config_file(tmp_path) == tmp_path / "pyproject.toml"

    write_text(tmp_path / "roxy.toml", '[context]\nwho = "roxy"\n')
    assert MutableConfig.discover_config_file(tmp_path) == tmp_path / "roxy.toml"

    config: Config = MutableConfig.load_merged(start=tmp_path).freeze()
    assert dict(config.context) == {"who": "roxy"}


def test_load_merged_with_explicit_file(tmp_path: Path) -> None:
    path: Path = write_text(tmp_path / "custom.toml", '[pipeline]\nsteps = ["markdown"]\n')

    config: Config = MutableConfig.load_merged(config_file=path, start=tmp_path).freeze()

    assert config.steps == ("markdown",)
    assert config.config_files == (path,)


def test_load_merged_without_config_uses_defaults(tmp_path: Path) -> None:
    config: Config = MutableConfig.load_merged(start=tmp_path).freeze()

    assert config == MutableConfig.from_defaults().freeze()


def test_context_is_merged_key_by_key() -> None:
    low = MutableConfig(context={"a": "low", "b": "low"})
    high = MutableConfig(context={"b": "high", "c": "high"})

    merged: Config = low.merge_with(high).freeze()

    assert dict(merged.context) == {"a": "low", "b": "high", "c": "high"}


def test_cli_args_override_file_values(tmp_path: Path) -> None:
    path: Path = write_text(
        tmp_path / "roxy.toml",
        '[pipeline]\nsteps = ["markdown"]\n\n[context]\ntitle = "file"\nkeep = "yes"\n',
    )
    draft: MutableConfig = MutableConfig.load_merged(config_file=path)

    config: Config = draft.apply_cli_args(
        {
            "steps": ["template", "markdown"],
            "vars": {"title": "cli"},
            "source": "src-dir",
            "output": None,
            "dry_run": True,
        }
    ).freeze()

    assert config.steps == ("template", "markdown")
    assert dict(config.context) == {"title": "cli", "keep": "yes"}
    assert config.source == Path("src-dir")
    assert config.output == Path("public")
    assert config.dry_run is True


def test_empty_cli_steps_keep_configured_steps() -> None:
    config: Config = MutableConfig(steps=["template"]).apply_cli_args({"steps": []}).freeze()

    assert config.steps == ("template",)


def test_to_toml_dict_round_trips_through_builder() -> None:
    config: Config = make_config(context={"k": "v"}, steps=["template"])

    again: Config = MutableConfig.from_toml_dict(config.to_toml_dict()).freeze()

    assert again == config
