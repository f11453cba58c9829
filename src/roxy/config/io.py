# roxy:header:start
#
#   project      : Roxy
#   file         : io.py
#   file_relpath : src/roxy/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""TOML I/O and value getters for Roxy configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain ``dict`` structures. Runtime defaults are defined in code
(`load_defaults_dict`) so Roxy works without any configuration file.

Getters are lenient: a value of the wrong shape is logged and replaced by the
default, so a typo in one key does not prevent a build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from roxy.config.keys import Toml
from roxy.config.logging import get_logger
from roxy.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from roxy.config.logging import RoxyLogger

TomlTable = dict[str, Any]

logger: RoxyLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Roxy's **runtime defaults** as a new TOML-compatible dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_PIPELINE: {
            # Markdown first: template syntax then survives into the rendered HTML.
            Toml.KEY_STEPS: ["markdown", "template"],
        },
        Toml.SECTION_MARKDOWN: {
            Toml.KEY_EXTENSIONS: [],
        },
        Toml.SECTION_TEMPLATE: {
            Toml.KEY_STRICT: True,
            Toml.KEY_AUTOESCAPE: ["html", "htm", "xml"],
        },
        Toml.SECTION_CONTEXT: {},
        Toml.SECTION_BUILD: {
            Toml.KEY_SOURCE: "content",
            Toml.KEY_OUTPUT: "public",
            Toml.KEY_INCLUDE: ["**/*.md"],
            Toml.KEY_EXCLUDE: [],
            Toml.KEY_EXTENSION: ".html",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``roxy.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {path}: {e}") from e
    data_any: Any = doc.unwrap()
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_pyproject_table(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.roxy]`` table of a parsed ``pyproject.toml``, if present."""
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    table: Any = tool.get(Toml.SECTION_TOOL_ROXY)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def to_toml(data: TomlTable) -> str:
    """Render a TOML-compatible dict as TOML text."""
    return tomlkit.dumps(data)


# --- Getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict when absent or not a table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        TomlTable: The sub-table, or ``{}``.
    """
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected a table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value; ``int``/``float`` values are coerced.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not coercible.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    logger.warning("Cannot coerce %s=%r to a string; ignoring", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not a boolean.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    logger.warning("Expected a boolean for %s, got %r; ignoring", key, value)
    return None


def get_list_value_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings.

    A bare string is accepted as a one-element list. Non-string items are dropped
    with a warning.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str] | None: The list, or ``None`` when absent or of the wrong shape.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected a list for %s, got %r; ignoring", key, value)
        return None
    items: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            items.append(item)
        else:
            logger.warning("Ignoring non-string item %r in %s", item, key)
    return items
