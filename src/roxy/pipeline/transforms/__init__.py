# roxy:header:start
#
#   project      : Roxy
#   file         : __init__.py
#   file_relpath : src/roxy/pipeline/transforms/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Concrete transformation steps.

- `MarkdownTransform`: Markdown bytes to HTML bytes (Python-Markdown).
- `TemplateTransform`: render the input as a Jinja2 template with a fixed binding set.
"""

from __future__ import annotations

from roxy.pipeline.transforms.base import BaseTransform, decode_text, encode_text
from roxy.pipeline.transforms.markdown import MarkdownTransform
from roxy.pipeline.transforms.template import TemplateTransform

__all__ = [
    "BaseTransform",
    "MarkdownTransform",
    "TemplateTransform",
    "decode_text",
    "encode_text",
]
