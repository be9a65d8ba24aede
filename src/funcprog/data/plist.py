"""Persistent singly-linked list.

A PList is either the Nil singleton or a Cons cell holding a head and a
shared tail. Cells are never mutated, so suffixes are shared freely between
lists: tail, drop and drop_while hand back existing cells, append copies only
the left spine.

Every traversal is a loop (or a fold built on one), so call depth stays
constant however long the list is:
- fold_left: direct left-to-right loop
- fold_right: explicit work stack, combines right to left
- fold_right_via_fold_left: reverse, then left-fold with a flipped combinator
- map / filter / flat_map: left fold into a reversed accumulator, then reverse
- append / concat: right folds that share the last list

Example:
    >>> xs = PList.of(1, 2, 3)
    >>> xs.map(lambda x: x * 10)
    PList.of(10, 20, 30)
    >>> xs.fold_right(0, lambda x, acc: x - acc)
    2
    >>> has_subsequence(PList.of(1, 2, 3, 4), PList.of(2, 3))
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, TypeVar

from ..foundation.errors import ErrorCode, FaultException
from .option import Absent, Opt, Present

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


class PList(Generic[T]):
    """Base of the two list variants, Cons and Nil. Not instantiated directly."""

    __slots__ = ()

    head: T
    tail: PList[T]

    # ─── Construction ────────────────────────────────────────────────

    @staticmethod
    def of(*items: T) -> PList[T]:
        """Build a list from positional items, first item at the head."""
        return plist(items)

    def prepend(self, item: T) -> PList[T]:
        return Cons(item, self)

    # ─── Inspection ──────────────────────────────────────────────────

    def is_empty(self) -> bool:
        return self is Nil

    def head_option(self) -> Opt[T]:
        return Absent if self is Nil else Present(self.head)

    def length(self) -> int:
        return self.fold_left(0, lambda acc, _: acc + 1)

    def match(self, *, cons: Callable[[T, PList[T]], U], nil: Callable[[], U]) -> U:
        """Exhaustive case analysis over both variants."""
        return nil() if self is Nil else cons(self.head, self.tail)

    # ─── Structural Edits ────────────────────────────────────────────

    def set_head(self, item: T) -> PList[T]:
        """Replace the head, sharing the tail. On Nil, yields a one-element list."""
        return Cons(item, self.tail)

    def drop(self, n: int) -> PList[T]:
        """Drop the first n elements; the result is a suffix of self. n <= 0 returns self."""
        cur = self
        while n > 0 and cur is not Nil:
            cur, n = cur.tail, n - 1
        return cur

    def drop_while(self, pred: Callable[[T], bool]) -> PList[T]:
        cur = self
        while cur is not Nil and pred(cur.head):
            cur = cur.tail
        return cur

    def init(self) -> PList[T]:
        """All elements but the last. Nil stays Nil."""
        if self is Nil:
            return self
        items = list(self)
        items.pop()
        return plist(items)

    # ─── Folds ───────────────────────────────────────────────────────

    def fold_left(self, seed: B, f: Callable[[B, T], B]) -> B:
        """Left-associative fold: f(f(f(seed, x1), x2), x3)."""
        acc, cur = seed, self
        while cur is not Nil:
            acc, cur = f(acc, cur.head), cur.tail
        return acc

    def fold_right(self, seed: B, f: Callable[[T, B], B]) -> B:
        """Right-associative fold: f(x1, f(x2, f(x3, seed))). Uses a work stack, not the call stack."""
        stack = list(self)
        acc = seed
        while stack:
            acc = f(stack.pop(), acc)
        return acc

    def fold_right_via_fold_left(self, seed: B, f: Callable[[T, B], B]) -> B:
        return self.reverse().fold_left(seed, lambda b, a: f(a, b))

    def sum(self) -> Any:
        return self.fold_left(0, lambda acc, x: acc + x)

    def product(self) -> Any:
        """Product of the elements; stops at the first zero without visiting the rest."""
        acc: Any = 1
        cur = self
        while cur is not Nil:
            if cur.head == 0:
                return cur.head
            acc, cur = acc * cur.head, cur.tail
        return acc

    # ─── Transformations ─────────────────────────────────────────────

    def reverse(self) -> PList[T]:
        return self.fold_left(Nil, lambda acc, h: Cons(h, acc))

    def append(self, other: PList[T]) -> PList[T]:
        """Copy this spine and share `other` as the new tail. O(len(self))."""
        return self.fold_right(other, Cons)

    def map(self, f: Callable[[T], U]) -> PList[U]:
        return self.fold_left(Nil, lambda acc, h: Cons(f(h), acc)).reverse()

    def filter(self, pred: Callable[[T], bool]) -> PList[T]:
        return self.fold_left(Nil, lambda acc, h: Cons(h, acc) if pred(h) else acc).reverse()

    def flat_map(self, f: Callable[[T], PList[U]]) -> PList[U]:
        return self.fold_left(Nil, lambda acc, h: f(h).fold_left(acc, lambda a, x: Cons(x, a))).reverse()

    def zip_with(self, other: PList[U], f: Callable[[T, U], B]) -> PList[B]:
        """Pairwise combine; stops at the end of the shorter list."""
        out: list[B] = []
        a, b = self, other
        while a is not Nil and b is not Nil:
            out.append(f(a.head, b.head))
            a, b = a.tail, b.tail
        return plist(out)

    # ─── Subsequences ────────────────────────────────────────────────

    def starts_with(self, prefix: PList[T]) -> bool:
        a, p = self, prefix
        while p is not Nil:
            if a is Nil or a.head != p.head:
                return False
            a, p = a.tail, p.tail
        return True

    def has_subsequence(self, sub: PList[T]) -> bool:
        """True iff `sub` occurs as a contiguous run. Probes starts_with at each position."""
        cur = self
        while True:
            if cur.starts_with(sub):
                return True
            if cur is Nil:
                return False
            cur = cur.tail

    # ─── Conversion & Dunder Methods ─────────────────────────────────

    def to_list(self) -> list[T]:
        return list(self)

    def __iter__(self) -> Iterator[T]:
        cur = self
        while cur is not Nil:
            yield cur.head
            cur = cur.tail

    __len__ = length

    def __bool__(self) -> bool:
        return self is not Nil

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PList):
            return NotImplemented
        a, b = self, other
        while a is not b:
            if a is Nil or b is Nil or a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return True

    def __hash__(self) -> int:
        return hash(("PList", *self))

    def __repr__(self) -> str:
        return "Nil" if self is Nil else f"PList.of({', '.join(map(repr, self))})"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Cons(PList[T]):
    """Non-empty list cell. `tail` may be shared by any number of other cells."""

    head: T
    tail: PList[T]


class _Nil(PList[Any]):
    __slots__ = ()

    @property
    def head(self) -> NoReturn:
        raise FaultException.create(ErrorCode.ABSENT_VALUE, "head of empty list", "PList.head")

    @property
    def tail(self) -> PList[Any]:
        return self


Nil: PList[Any] = _Nil()


# ═══════════════════════════════════════════════════════════════════════════════
# Module-level Operations
# ═══════════════════════════════════════════════════════════════════════════════


def plist(items: Iterable[T]) -> PList[T]:
    """Build a list from any finite iterable, preserving order."""
    out: PList[T] = Nil
    for item in reversed(list(items)):
        out = Cons(item, out)
    return out


def append(a: PList[T], b: PList[T]) -> PList[T]:
    return a.append(b)


def concat(lists: PList[PList[T]]) -> PList[T]:
    """Flatten a list of lists. The last list is shared, the others are copied."""
    return lists.fold_right(Nil, append)


def zip_with(a: PList[T], b: PList[U], f: Callable[[T, U], B]) -> PList[B]:
    return a.zip_with(b, f)


def has_subsequence(sup: PList[T], sub: PList[T]) -> bool:
    return sup.has_subsequence(sub)
