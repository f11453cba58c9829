# roxy:header:start
#
#   project      : Roxy
#   file         : __init__.py
#   file_relpath : src/roxy/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Roxy package.

Roxy is a small content-transformation pipeline: it loads a text asset, runs it
through an ordered chain of byte-to-byte steps (Markdown to HTML, then template
rendering), and writes the result to a destination. It exposes a click CLI and
a small typed API (`roxy.pipeline`, `roxy.engine`).
"""

from __future__ import annotations
