# roxy:header:start
#
#   project      : Roxy
#   file         : __init__.py
#   file_relpath : src/roxy/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Roxy transformation pipeline package.

This package contains:

- the step contract ([`roxy.pipeline.contracts`][roxy.pipeline.contracts]);
- the ordered step chain with its two-buffer hand-off
  ([`roxy.pipeline.pipeline`][roxy.pipeline.pipeline]);
- the concrete steps ([`roxy.pipeline.transforms`][roxy.pipeline.transforms]);
- the named-step registry used to assemble a pipeline from configuration
  ([`roxy.pipeline.pipelines`][roxy.pipeline.pipelines]).
"""

from __future__ import annotations

from roxy.pipeline.contracts import BytesLike, Transform
from roxy.pipeline.pipeline import Pipeline

__all__ = ["BytesLike", "Pipeline", "Transform"]
