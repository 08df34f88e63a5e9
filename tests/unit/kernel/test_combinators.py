"""Unit tests for option combinators — map, process, flatten, wrap, wrap_fn."""

from __future__ import annotations

from typing import Any

import pytest

from causal_option.kernel.errors import (
    ERR_EMPTY_OPTION,
    JoinedCause,
    SkippedTransformError,
    matches,
)
from causal_option.kernel.types import Nothing, Some, combinators, is_none, is_some, none


def _double_nonzero(v: int) -> int:
    if v == 0:
        raise ValueError("zero value")
    return 2 * v


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, v: Any) -> Any:
        self.calls += 1
        return v


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------


class TestMap:
    def test_present(self) -> None:
        assert combinators.map(Some(5), lambda x: x + 3) == Some(8)

    def test_method_form(self) -> None:
        assert Some("ab").map(str.upper) == Some("AB")

    def test_changes_type(self) -> None:
        assert combinators.map(Some(3), str) == Some("3")

    def test_absent_never_calls_fn(self) -> None:
        err = ValueError("upstream")
        counter = _Counter()
        result = combinators.map(none(err), counter)
        assert counter.calls == 0
        assert is_none(result)
        assert result.cause is err

    def test_fn_exception_propagates(self) -> None:
        with pytest.raises(ValueError, match="zero value"):
            combinators.map(Some(0), _double_nonzero)

    def test_chain_short_circuits_after_first_absence(self) -> None:
        counter = _Counter()
        err = KeyError("missing")
        result = none(err).map(counter).map(counter).process(counter)
        assert counter.calls == 0
        assert result.cause is err


# ---------------------------------------------------------------------------
# process
# ---------------------------------------------------------------------------


class TestProcess:
    def test_success(self) -> None:
        assert combinators.process(Some(5), _double_nonzero) == Some(10)

    def test_failure_becomes_cause(self) -> None:
        result = combinators.process(Some(0), _double_nonzero)
        assert is_none(result)
        assert isinstance(result.cause, ValueError)
        assert str(result.cause) == "zero value"
        assert result.ok() is None

    def test_absent_never_calls_fn(self) -> None:
        err = RuntimeError("no input")
        counter = _Counter()
        result = combinators.process(none(err), counter)
        assert counter.calls == 0
        assert matches(result.cause, err)

    def test_failure_then_later_steps_skipped(self) -> None:
        counter = _Counter()
        result = Some(0).process(_double_nonzero).map(counter)
        assert counter.calls == 0
        assert str(result.cause) == "zero value"

    def test_returning_none_is_still_present(self) -> None:
        result = Some({"a": 1}).process(lambda d: d.get("b"))
        assert is_some(result)
        assert result.ok() is None


# ---------------------------------------------------------------------------
# annotate=True — skipped-transform diagnostics
# ---------------------------------------------------------------------------


class TestSkippedTransformAnnotation:
    def test_wraps_cause_and_names_function(self) -> None:
        err = ValueError("root")
        result = combinators.map(none(err), _double_nonzero, annotate=True)
        assert isinstance(result.cause, SkippedTransformError)
        assert "_double_nonzero" in result.cause.transform
        assert "_double_nonzero" in str(result.cause)
        assert matches(result.cause, err)

    def test_nested_annotations_keep_root_matchable(self) -> None:
        err = ValueError("root")
        result = none(err).process(int, annotate=True).map(str, annotate=True)
        assert matches(result.cause, err)
        assert matches(result.cause, SkippedTransformError)

    def test_default_forwards_verbatim(self) -> None:
        opt = none(ValueError("root"))
        assert opt.map(str) is opt

    def test_skip_writes_nothing_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        none(ValueError("x")).map(str)
        combinators.process(none(), int)
        none().map(_double_nonzero, annotate=True)
        assert capsys.readouterr().out == ""


# ---------------------------------------------------------------------------
# flatten
# ---------------------------------------------------------------------------


class TestFlatten:
    def test_present_inner_present(self) -> None:
        assert combinators.flatten(Some(Some(100))) == Some(100)

    def test_present_inner_absent_returned_unchanged(self) -> None:
        inner = none(ValueError("inner"))
        assert combinators.flatten(Some(inner)) is inner

    def test_absent_outer(self) -> None:
        result = combinators.flatten(none())
        assert is_none(result)
        assert matches(result.cause, ERR_EMPTY_OPTION)

    def test_absent_outer_keeps_its_cause(self) -> None:
        err = LookupError("outer")
        assert Nothing(err).flatten().cause is err

    def test_non_option_value_raises(self) -> None:
        with pytest.raises(TypeError):
            Some(5).flatten()


# ---------------------------------------------------------------------------
# wrap / wrap_fn / from_nullable
# ---------------------------------------------------------------------------


class TestWrap:
    def test_no_error_is_some(self) -> None:
        assert combinators.wrap(3) == Some(3)

    def test_none_error_is_some(self) -> None:
        assert combinators.wrap(3, None) == Some(3)

    def test_error_is_nothing(self) -> None:
        err = OSError("io")
        result = combinators.wrap(3, err)
        assert is_none(result)
        assert result.cause is err

    def test_several_errors_are_joined(self) -> None:
        e1, e2 = OSError("a"), ValueError("b")
        result = combinators.wrap("v", e1, None, e2)
        assert isinstance(result.cause, JoinedCause)
        assert matches(result.cause, e1)
        assert matches(result.cause, e2)


class TestWrapFn:
    def test_success(self) -> None:
        thunk = combinators.wrap_fn(lambda: 42)
        assert thunk() == Some(42)

    def test_failure(self) -> None:
        def boom() -> int:
            raise ConnectionError("down")

        result = combinators.wrap_fn(boom)()
        assert isinstance(result.cause, ConnectionError)

    def test_is_lazy(self) -> None:
        counter = _Counter()
        thunk = combinators.wrap_fn(lambda: counter(1))
        assert counter.calls == 0
        thunk()
        thunk()
        assert counter.calls == 2


class TestFromNullable:
    def test_value(self) -> None:
        assert combinators.from_nullable(0) == Some(0)

    def test_none_with_cause(self) -> None:
        err = KeyError("PORT")
        assert combinators.from_nullable(None, err).cause is err

    def test_none_without_cause(self) -> None:
        assert combinators.from_nullable(None).cause is ERR_EMPTY_OPTION
