# roxy:header:start
#
#   project      : Roxy
#   file         : keys.py
#   file_relpath : src/roxy/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Canonical TOML section and key names for Roxy configuration.

These constants are the external configuration API as it appears in
``roxy.toml`` and in ``[tool.roxy]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Roxy configuration."""

    # [pipeline]
    SECTION_PIPELINE: Final[str] = "pipeline"

    KEY_STEPS: Final[str] = "steps"

    # [markdown]
    SECTION_MARKDOWN: Final[str] = "markdown"

    KEY_EXTENSIONS: Final[str] = "extensions"

    # [template]
    SECTION_TEMPLATE: Final[str] = "template"

    KEY_STRICT: Final[str] = "strict"
    KEY_AUTOESCAPE: Final[str] = "autoescape"

    # [context]: free-form binding set for the template step
    SECTION_CONTEXT: Final[str] = "context"

    # [build]
    SECTION_BUILD: Final[str] = "build"

    KEY_SOURCE: Final[str] = "source"
    KEY_OUTPUT: Final[str] = "output"
    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"
    KEY_EXTENSION: Final[str] = "extension"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_ROXY: Final[str] = "roxy"
