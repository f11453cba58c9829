# roxy:header:start
#
#   project      : Roxy
#   file         : test_pipeline_property.py
#   file_relpath : tests/pipeline/test_pipeline_property.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Hypothesis property tests for pipeline composition and lossy decoding."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from roxy.pipeline import Pipeline
from roxy.pipeline.transforms import MarkdownTransform, decode_text
from tests.conftest import mark_pipeline
from tests.pipeline.conftest import AppendTransform

suffixes = st.lists(st.binary(min_size=1, max_size=4), max_size=6)
printable_text = st.text(alphabet=st.characters(blacklist_categories=("Cc", "Cs")), max_size=200)


@mark_pipeline
@given(data=st.binary(max_size=256))
def test_empty_pipeline_returns_input(data: bytes) -> None:
    assert Pipeline().run("x", data) == data


@mark_pipeline
@given(data=st.binary(max_size=64), parts=suffixes)
def test_steps_compose_in_insertion_order(data: bytes, parts: list[bytes]) -> None:
    pipeline = Pipeline(AppendTransform(p) for p in parts)

    assert pipeline.run("x", data) == data + b"".join(parts)


@mark_pipeline
@given(data=st.binary(max_size=256))
def test_lossy_decoding_never_raises(data: bytes) -> None:
    text: str = decode_text(data)

    assert isinstance(text, str)


@mark_pipeline
@given(text=printable_text, damaged=st.booleans())
def test_markdown_output_is_newline_terminated_utf8(text: str, damaged: bool) -> None:
    data: bytes = text.encode("utf-8") + (b"\xff" if damaged else b"")

    html: bytes = MarkdownTransform().apply("x.html", data)

    assert html == b"" or html.endswith(b"\n")
    html.decode("utf-8")
