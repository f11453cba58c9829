# roxy:header:start
#
#   project      : Roxy
#   file         : constants.py
#   file_relpath : src/roxy/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Roxy Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ROXY_VERSION: str = get_version("roxy")
except PackageNotFoundError:  # running from a source checkout without installation
    ROXY_VERSION = "0.0.0"

#: Locator meaning "standard input" (as a source) or "standard output" (as a destination).
STDIO_LOCATOR: str = "-"
