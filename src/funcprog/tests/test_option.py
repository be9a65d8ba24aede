"""Tests for the Opt container.

Validates:
- Functor and monad laws (including map fusion over generated values)
- Laziness of get_or_else / or_else
- sequence / traverse short-circuiting
- Total statistics helpers
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from funcprog.data.option import (
    Absent,
    Opt,
    Present,
    lift,
    map2,
    mean,
    sequence,
    traverse,
    variance,
)
from funcprog.foundation.errors import ErrorCode, FaultException

opts = st.one_of(st.just(Absent), st.integers().map(Present))


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Laws
# ═════════════════════════════════════════════════════════════════════════════


@given(opts)
def test_map_fusion(o: Opt[int]) -> None:
    """o.map(f).map(g) == o.map(g . f)"""
    f = lambda x: x + 1
    g = lambda x: x * 3
    assert o.map(f).map(g) == o.map(lambda x: g(f(x)))


@given(opts)
def test_map_identity(o: Opt[int]) -> None:
    assert o.map(lambda x: x) == o


@given(st.integers())
def test_monad_left_identity(a: int) -> None:
    f = lambda x: Present(x * 2) if x % 2 else Absent
    assert Present(a).flat_map(f) == f(a)


@given(opts)
def test_monad_right_identity(o: Opt[int]) -> None:
    assert o.flat_map(Present) == o


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_map_applies_once() -> None:
    calls: list[int] = []
    assert Present(2).map(lambda x: calls.append(x) or x + 1) == Present(3)
    assert calls == [2]


def test_absent_short_circuits() -> None:
    calls: list[int] = []
    assert Absent.map(lambda x: calls.append(x)) is Absent
    assert Absent.flat_map(lambda x: calls.append(x)) is Absent
    assert calls == []


def test_get_or_else_lazy() -> None:
    """The default thunk runs only on the absent path."""
    def boom() -> int:
        raise AssertionError("default evaluated")

    assert Present(1).get_or_else(boom) == 1
    assert Absent.get_or_else(lambda: 7) == 7


def test_or_else_lazy() -> None:
    def boom() -> Opt[int]:
        raise AssertionError("alternative evaluated")

    assert Present(1).or_else(boom) == Present(1)
    assert Absent.or_else(lambda: Present(2)) == Present(2)


def test_filter() -> None:
    assert Present(4).filter(lambda x: x % 2 == 0) == Present(4)
    assert Present(3).filter(lambda x: x % 2 == 0) is Absent
    assert Absent.filter(lambda x: True) is Absent


def test_of_bridges_none() -> None:
    assert Opt.of(None) is Absent
    assert Opt.of(0) == Present(0)


def test_present_none_is_present() -> None:
    assert Present(None).is_present()
    assert Present(None) != Absent


def test_get_on_absent_faults() -> None:
    assert Present(5).get() == 5
    with pytest.raises(FaultException) as info:
        Absent.get()
    assert info.value.code == ErrorCode.ABSENT_VALUE


def test_match_exhaustive() -> None:
    render = lambda o: o.match(present=lambda x: f"got {x}", absent=lambda: "nothing")
    assert render(Present(3)) == "got 3"
    assert render(Absent) == "nothing"


def test_structural_pattern_matching() -> None:
    def describe(o: Opt[int]) -> str:
        match o:
            case Opt(value, True):
                return f"got {value}"
            case _:
                return "nothing"

    assert describe(Present(3)) == "got 3"
    assert describe(Present(None)) == "got None"
    assert describe(Absent) == "nothing"


def test_dunders() -> None:
    assert repr(Present(1)) == "Present(1)"
    assert repr(Absent) == "Absent"
    assert list(Present(1)) == [1]
    assert list(Absent) == []
    assert not Absent
    assert hash(Present(1)) == hash(Present(1))


# ═════════════════════════════════════════════════════════════════════════════
# map2 / sequence / traverse
# ═════════════════════════════════════════════════════════════════════════════


def test_map2() -> None:
    add = lambda a, b: a + b
    assert map2(Present(1), Present(2), add) == Present(3)
    assert map2(Absent, Present(2), add) is Absent
    assert map2(Present(1), Absent, add) is Absent


def test_lift() -> None:
    lifted_abs = lift(abs)
    assert lifted_abs(Present(-3)) == Present(3)
    assert lifted_abs(Absent) is Absent


def test_sequence() -> None:
    assert sequence([Present(1), Present(2), Present(3)]) == Present([1, 2, 3])
    assert sequence([Present(1), Absent, Present(3)]) is Absent
    assert sequence([]) == Present([])


def test_sequence_stops_at_first_absence() -> None:
    seen: list[int] = []

    def gen():
        for i, o in enumerate([Present(1), Absent, Present(3)]):
            seen.append(i)
            yield o

    assert sequence(gen()) is Absent
    assert seen == [0, 1]


def test_traverse() -> None:
    parse = lambda s: Present(int(s)) if s.isdigit() else Absent
    assert traverse(["1", "2"], parse) == Present([1, 2])
    assert traverse(["1", "x", "2"], parse) is Absent


def test_traverse_matches_map_then_sequence() -> None:
    parse = lambda s: Present(int(s)) if s.isdigit() else Absent
    for items in (["1", "2", "3"], ["1", "a"], []):
        assert traverse(items, parse) == sequence([parse(s) for s in items])


# ═════════════════════════════════════════════════════════════════════════════
# Statistics
# ═════════════════════════════════════════════════════════════════════════════


def test_mean() -> None:
    assert mean([1.0, 2.0, 3.0]) == Present(2.0)
    assert mean([]) is Absent


def test_variance() -> None:
    assert variance([1.0, 2.0, 3.0, 4.0]) == Present(1.25)
    assert variance([]) is Absent
