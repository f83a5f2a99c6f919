"""Property-based checks of the functor and monad laws for both containers."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from vessel import Absent, Failure, Option, Present, Result, Success, match

pytestmark = pytest.mark.unit

options = st.one_of(st.integers().map(Present), st.just(Absent()))
results = st.one_of(st.integers().map(Success), st.text(max_size=5).map(Failure))


def _f(x: int) -> int:
    return x + 1


def _g(x: int) -> int:
    return x * 2


def _opt_step(x: int) -> Option[int]:
    return Present(x * 3) if x % 2 else Absent()


def _opt_step2(x: int) -> Option[int]:
    return Present(x - 1) if x > 0 else Absent()


def _res_step(x: int) -> Result[int, str]:
    return Success(x * 3) if x % 2 else Failure("even")


def _res_step2(x: int) -> Result[int, str]:
    return Success(x - 1) if x > 0 else Failure("non-positive")


@given(v=st.integers())
@settings(max_examples=50, deadline=None, derandomize=True)
def test_present_queries_and_map(v: int) -> None:
    opt = Present(v)
    assert opt.is_present() and not opt.is_absent()
    assert opt.map(_f).unwrap() == _f(v)


@given(m=options)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_option_functor_laws(m: Option[int]) -> None:
    assert m.map(lambda x: x) == m
    assert m.map(_f).map(_g) == m.map(lambda x: _g(_f(x)))


@given(v=st.integers(), m=options)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_option_monad_laws(v: int, m: Option[int]) -> None:
    assert Present(v).flat_map(_opt_step) == _opt_step(v)
    assert m.flat_map(Present) == m
    assert m.flat_map(_opt_step).flat_map(_opt_step2) == m.flat_map(
        lambda x: _opt_step(x).flat_map(_opt_step2)
    )
    assert Absent().flat_map(_opt_step).is_absent()


@given(m=results)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_result_functor_laws(m: Result[int, str]) -> None:
    assert m.map(lambda x: x) == m
    assert m.map(_f).map(_g) == m.map(lambda x: _g(_f(x)))


@given(v=st.integers(), m=results)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_result_monad_laws(v: int, m: Result[int, str]) -> None:
    assert Success(v).flat_map(_res_step) == _res_step(v)
    assert m.flat_map(Success) == m
    assert m.flat_map(_res_step).flat_map(_res_step2) == m.flat_map(
        lambda x: _res_step(x).flat_map(_res_step2)
    )


@given(m=options)
@settings(max_examples=30, deadline=None, derandomize=True)
def test_standalone_match_agrees_with_method(m: Option[int]) -> None:
    handlers = {"present": _f, "absent": lambda: 0}
    assert match(m, **handlers) == m.match(**handlers)


@given(values=st.lists(st.integers(), max_size=8))
@settings(max_examples=30, deadline=None, derandomize=True)
def test_combine_of_successes_preserves_order(values: list[int]) -> None:
    assert Result.combine([Success(v) for v in values]).unwrap() == values


@given(a=options, b=options)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_xor_is_present_iff_exactly_one_present(
    a: Option[int], b: Option[int]
) -> None:
    assert a.xor(b).is_present() == (a.is_present() != b.is_present())
    assert a.zip(b).is_present() == (a.is_present() and b.is_present())
