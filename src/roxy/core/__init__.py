# roxy:header:start
#
#   project      : Roxy
#   file         : __init__.py
#   file_relpath : src/roxy/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Core primitives shared by the pipeline, engine and CLI layers.

This package is dependency-light: it holds the error taxonomy and the exit codes,
and must not import from `roxy.cli`.
"""
