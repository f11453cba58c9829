# roxy:header:start
#
#   project      : Roxy
#   file         : test_pipeline.py
#   file_relpath : tests/pipeline/test_pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 The Roxy Authors
#
# roxy:header:end

"""Tests for `roxy.pipeline.Pipeline`.

Covers the buffer hand-off between steps, context threading, short-circuiting
on the first failure (destination untouched), and wrapping of unexpected
exceptions into `TransformError`.
"""

from __future__ import annotations

import pytest

from roxy.core.errors import TransformError
from roxy.pipeline import Pipeline, Transform
from tests.conftest import mark_pipeline, parametrize
from tests.pipeline.conftest import AppendTransform, FailingTransform, RecordingTransform


@mark_pipeline
@parametrize("data", [b"", b"hello", b"\xff\xfe raw \x00 bytes"])
def test_empty_pipeline_is_pass_through(data: bytes) -> None:
    pipeline = Pipeline()

    assert len(pipeline) == 0
    assert pipeline.run("out.html", data) == data


@mark_pipeline
def test_run_into_appends_to_destination() -> None:
    pipeline = Pipeline([AppendTransform(b"!")])
    destination = bytearray(b"prefix:")

    pipeline.run_into("out.html", b"abc", destination)

    assert destination == bytearray(b"prefix:abc!")


@mark_pipeline
def test_push_returns_pipeline_and_keeps_insertion_order() -> None:
    a = AppendTransform(b"a", name="a")
    b = AppendTransform(b"b", name="b")

    pipeline = Pipeline().push(a).push(b)

    assert pipeline.steps == (a, b)
    assert [step.name for step in pipeline] == ["a", "b"]
    assert repr(pipeline) == "Pipeline([a, b])"


@mark_pipeline
def test_order_of_steps_determines_result() -> None:
    ab = Pipeline([AppendTransform(b"a"), AppendTransform(b"b")])
    ba = Pipeline([AppendTransform(b"b"), AppendTransform(b"a")])

    assert ab.run("x", b">") == b">ab"
    assert ba.run("x", b">") == b">ba"


@mark_pipeline
def test_each_step_sees_only_previous_output() -> None:
    first = RecordingTransform("first")
    second = AppendTransform(b"-2")
    third = RecordingTransform("third")
    fourth = AppendTransform(b"-4")
    fifth = RecordingTransform("fifth")

    result: bytes = Pipeline([first, second, third, fourth, fifth]).run("ctx", b"in")

    assert first.calls == [("ctx", b"in")]
    assert third.calls == [("ctx", b"in-2")]
    # Never stale bytes from two steps earlier.
    assert fifth.calls == [("ctx", b"in-2-4")]
    assert result == b"in-2-4"


@mark_pipeline
def test_context_id_is_threaded_unchanged() -> None:
    steps = [RecordingTransform(f"r{i}") for i in range(3)]

    Pipeline(steps).run("public/blog/post.html", b"x")

    assert all(step.calls == [("public/blog/post.html", b"x")] for step in steps)


@mark_pipeline
def test_input_buffer_is_not_mutated() -> None:
    data = bytearray(b"original")

    Pipeline([AppendTransform(b"+")]).run("x", data)

    assert data == bytearray(b"original")


@mark_pipeline
def test_failure_short_circuits_and_leaves_destination_untouched() -> None:
    after = RecordingTransform("after")
    pipeline = Pipeline([AppendTransform(b"1"), FailingTransform(), after])
    destination = bytearray(b"keep")

    with pytest.raises(TransformError) as excinfo:
        pipeline.run_into("page.html", b"data", destination)

    assert after.calls == []
    assert destination == bytearray(b"keep")
    assert excinfo.value.step == "failing"
    assert excinfo.value.context_id == "page.html"
    assert str(excinfo.value) == "failing: boom"


@mark_pipeline
def test_unexpected_exception_is_wrapped() -> None:
    pipeline = Pipeline([FailingTransform(ZeroDivisionError("division by zero"), name="math")])

    with pytest.raises(TransformError) as excinfo:
        pipeline.run("x", b"")

    assert excinfo.value.step == "math"
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
    assert "ZeroDivisionError" in str(excinfo.value)


@mark_pipeline
def test_pipeline_can_be_rerun() -> None:
    recorder = RecordingTransform()
    pipeline = Pipeline([recorder, AppendTransform(b"!")])

    assert pipeline.run("a", b"1") == b"1!"
    assert pipeline.run("b", b"2") == b"2!"
    assert recorder.calls == [("a", b"1"), ("b", b"2")]


@mark_pipeline
def test_base_transform_satisfies_protocol() -> None:
    step = AppendTransform(b"?")

    assert isinstance(step, Transform)
    assert step.apply("x", memoryview(b"why")) == b"why?"


@mark_pipeline
def test_distinct_steps_are_not_equal() -> None:
    assert AppendTransform(b"x") != AppendTransform(b"x")
