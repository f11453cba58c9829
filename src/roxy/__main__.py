# roxy:header:start
#
#   project      : Roxy
#   file         : __main__.py
#   file_relpath : src/roxy/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Module entry point for running Roxy via ``python -m roxy``.

Delegates to :func:`roxy.cli.main.cli`, the single authoritative CLI entry point.

Examples:
    Render one page::

        python -m roxy render content/index.md public/index.html
"""

from __future__ import annotations

from roxy.cli.main import cli

if __name__ == "__main__":
    cli()
