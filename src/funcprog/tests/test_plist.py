"""Tests for the persistent list.

Validates:
- Structural sharing on tail / drop / append
- Fold semantics and stack safety on long lists
- Order preservation of map / filter / flat_map / concat
- Subsequence search edge cases
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from funcprog.data.option import Absent, Present
from funcprog.data.plist import (
    Cons,
    Nil,
    PList,
    append,
    concat,
    has_subsequence,
    plist,
    zip_with,
)
from funcprog.foundation.errors import FaultException

int_lists = st.lists(st.integers(), max_size=50).map(plist)

LONG = 100_000


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests
# ═════════════════════════════════════════════════════════════════════════════


@given(int_lists)
def test_reverse_involution(xs: PList[int]) -> None:
    assert xs.reverse().reverse() == xs


@given(int_lists, int_lists)
def test_append_length(xs: PList[int], ys: PList[int]) -> None:
    assert append(xs, ys).length() == xs.length() + ys.length()


@given(int_lists)
def test_fold_right_via_fold_left_agrees(xs: PList[int]) -> None:
    """Non-commutative combinator, so order mistakes would show."""
    f = lambda x, acc: x - 2 * acc
    assert xs.fold_right_via_fold_left(1, f) == xs.fold_right(1, f)


@given(int_lists)
def test_round_trip_python_list(xs: PList[int]) -> None:
    assert plist(xs.to_list()) == xs


@given(int_lists)
def test_map_filter_match_python(xs: PList[int]) -> None:
    items = xs.to_list()
    assert xs.map(lambda x: x * 2).to_list() == [x * 2 for x in items]
    assert xs.filter(lambda x: x % 3 == 0).to_list() == [x for x in items if x % 3 == 0]


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Structural Edits
# ═════════════════════════════════════════════════════════════════════════════


def test_construction() -> None:
    xs = PList.of(1, 2, 3)
    assert xs == Cons(1, Cons(2, Cons(3, Nil)))
    assert PList.of() is Nil
    assert repr(xs) == "PList.of(1, 2, 3)"
    assert repr(Nil) == "Nil"


def test_tail_shares_suffix() -> None:
    xs = PList.of(1, 2, 3)
    assert xs.tail is xs.tail
    assert xs.tail == PList.of(2, 3)
    assert Nil.tail is Nil


def test_set_head() -> None:
    xs = PList.of(1, 2, 3)
    ys = xs.set_head(9)
    assert ys == PList.of(9, 2, 3)
    assert ys.tail is xs.tail
    assert Nil.set_head(1) == PList.of(1)


def test_drop() -> None:
    xs = PList.of(1, 2, 3, 4)
    assert xs.drop(2) is xs.tail.tail
    assert xs.drop(0) is xs
    assert xs.drop(-1) is xs
    assert xs.drop(10) is Nil
    assert Nil.drop(3) is Nil


def test_drop_while() -> None:
    xs = PList.of(1, 2, 3, 1)
    assert xs.drop_while(lambda x: x < 3) == PList.of(3, 1)
    assert xs.drop_while(lambda x: True) is Nil


def test_init() -> None:
    assert PList.of(1, 2, 3).init() == PList.of(1, 2)
    assert PList.of(1).init() is Nil
    assert Nil.init() is Nil


def test_append_shares_right() -> None:
    xs, ys = PList.of(1, 2), PList.of(3, 4)
    zs = xs.append(ys)
    assert zs == PList.of(1, 2, 3, 4)
    assert zs.drop(2) is ys


def test_head_option() -> None:
    assert PList.of(5).head_option() == Present(5)
    assert Nil.head_option() is Absent
    with pytest.raises(FaultException):
        Nil.head


def test_match_exhaustive() -> None:
    describe = lambda xs: xs.match(cons=lambda h, t: f"{h}+{len(t)}", nil=lambda: "empty")
    assert describe(PList.of(1, 2, 3)) == "1+2"
    assert describe(Nil) == "empty"


def test_structural_pattern_matching() -> None:
    match PList.of(1, 2):
        case Cons(head, Cons(second, _)):
            assert (head, second) == (1, 2)
        case _:
            pytest.fail("Cons did not match")


# ═════════════════════════════════════════════════════════════════════════════
# Folds
# ═════════════════════════════════════════════════════════════════════════════


def test_sum_product_length() -> None:
    xs = PList.of(1, 2, 3, 4)
    assert xs.sum() == 10
    assert xs.product() == 24
    assert xs.length() == len(xs) == 4
    assert Nil.sum() == 0
    assert Nil.product() == 1


def test_product_short_circuits_on_zero() -> None:
    seen: list[int] = []

    class Spy(int):
        def __mul__(self, other: object) -> int:
            seen.append(int(self))
            return int.__mul__(self, other)  # type: ignore[arg-type]

        __rmul__ = __mul__

    xs = PList.of(Spy(2), Spy(0), Spy(5), Spy(7))
    assert xs.product() == 0
    assert 5 not in seen and 7 not in seen


def test_fold_directions() -> None:
    xs = PList.of(1, 2, 3)
    assert xs.fold_left("", lambda acc, x: f"({acc}{x})") == "(((1)2)3)"
    assert xs.fold_right("", lambda x, acc: f"({x}{acc})") == "(1(2(3)))"


def test_fold_right_rebuilds_list() -> None:
    xs = PList.of(1, 2, 3)
    assert xs.fold_right(Nil, Cons) == xs


def test_long_list_is_stack_safe() -> None:
    xs = plist(range(LONG))
    assert xs.fold_left(0, lambda a, x: a + x) == sum(range(LONG))
    assert xs.fold_right(0, lambda x, a: a + x) == sum(range(LONG))
    assert xs.map(lambda x: x + 1).length() == LONG
    assert xs.reverse().head_option() == Present(LONG - 1)
    assert xs == plist(range(LONG))
    assert xs.append(xs).length() == 2 * LONG


# ═════════════════════════════════════════════════════════════════════════════
# Transformations
# ═════════════════════════════════════════════════════════════════════════════


def test_map_filter_flat_map_preserve_order() -> None:
    xs = PList.of(1, 2, 3, 4)
    assert xs.map(str) == PList.of("1", "2", "3", "4")
    assert xs.filter(lambda x: x % 2 == 0) == PList.of(2, 4)
    assert xs.flat_map(lambda x: PList.of(x, x)) == PList.of(1, 1, 2, 2, 3, 3, 4, 4)


def test_concat() -> None:
    last = PList.of(5)
    nested = PList.of(PList.of(1, 2), Nil, PList.of(3, 4), last)
    flat = concat(nested)
    assert flat == PList.of(1, 2, 3, 4, 5)
    assert flat.drop(4) is last
    assert concat(Nil) is Nil


def test_zip_with_truncates() -> None:
    add = lambda a, b: a + b
    assert zip_with(PList.of(1, 2, 3), PList.of(10, 20), add) == PList.of(11, 22)
    assert zip_with(Nil, PList.of(1), add) is Nil


# ═════════════════════════════════════════════════════════════════════════════
# Subsequences
# ═════════════════════════════════════════════════════════════════════════════


def test_starts_with() -> None:
    xs = PList.of(1, 2, 3)
    assert xs.starts_with(PList.of(1, 2))
    assert xs.starts_with(Nil)
    assert not xs.starts_with(PList.of(2))
    assert not PList.of(1).starts_with(PList.of(1, 2))


def test_has_subsequence() -> None:
    assert has_subsequence(PList.of(1, 2, 3, 4), PList.of(2, 3))
    assert has_subsequence(PList.of(1, 2, 3, 4), PList.of(4))
    assert has_subsequence(PList.of(1, 2, 3), Nil)
    assert has_subsequence(Nil, Nil)
    assert not has_subsequence(Nil, PList.of(1))
    assert not has_subsequence(PList.of(1, 2, 3, 4), PList.of(1, 3))


def test_equality_and_hash() -> None:
    assert PList.of(1, 2) == PList.of(1, 2)
    assert PList.of(1, 2) != PList.of(1, 2, 3)
    assert PList.of(1, 2) != [1, 2]
    assert hash(PList.of(1, 2)) == hash(PList.of(1, 2))
