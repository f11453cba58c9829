# roxy:header:start
#
#   project      : Roxy
#   file         : __init__.py
#   file_relpath : src/roxy/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Command-line interface for Roxy (Click based)."""
