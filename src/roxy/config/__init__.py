# roxy:header:start
#
#   project      : Roxy
#   file         : __init__.py
#   file_relpath : src/roxy/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Roxy configuration package.

Re-exports the configuration model so callers can write
``from roxy.config import Config, MutableConfig``. Logging lives in
`roxy.config.logging`; TOML I/O in `roxy.config.io`.
"""

from __future__ import annotations

from roxy.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
