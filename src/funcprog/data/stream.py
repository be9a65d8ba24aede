"""Lazy, memoized, possibly infinite streams.

A Stream is either the End singleton or a Link whose head and tail are Lazy
cells. Nothing is computed until a consumer forces it, and nothing is
computed twice: a forced cell keeps its result for the lifetime of the node.

The combinators are built on a non-strict right fold. Its combining function
receives the accumulator as a thunk and may return without calling it, in
which case the rest of the stream is never visited. That is what lets
exists() stop early on an infinite stream and keeps map() productive.
Returning the thunk uncalled hands control back to the fold's loop, so
exists(), for_all() and flat_map() run in constant stack depth however many
elements they pass over.

unfold() is the general corecursive generator; from_() and fibs() are
specializations of it. constant() is a single node whose tail is itself.

Example:
    >>> from_(1).map(lambda x: x * x).take(4).to_list()
    [1, 4, 9, 16]
    >>> from_(0).exists(lambda x: x > 10)
    True
    >>> fibs().take(7).to_list()
    [0, 1, 1, 2, 3, 5, 8]

Caller obligation: to_list() only terminates on finite streams. It forces at
most ``limit`` elements (default ``FUNCPROG_STREAM_MATERIALIZE_LIMIT``) and
raises FaultException(STREAM_LIMIT) past that instead of hanging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from ..foundation.config import get_settings
from ..foundation.errors import ErrorCode, FaultException
from .lazy import Lazy
from .option import Absent, Opt, Present

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger("funcprog.stream")

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")
S = TypeVar("S")


def _cell(thunk: Callable[[], T]) -> Lazy[T]:
    return thunk if isinstance(thunk, Lazy) else Lazy(thunk)


class Stream(Generic[T]):
    """Base of the two stream variants, Link and End. Not instantiated directly."""

    __slots__ = ()

    head: Lazy[T]
    tail: Lazy[Stream[T]]

    # ─── Construction ────────────────────────────────────────────────

    @staticmethod
    def of(*items: T) -> Stream[T]:
        return from_iterable(items)

    @staticmethod
    def cons(head: Callable[[], T], tail: Callable[[], Stream[T]]) -> Stream[T]:
        return cons(head, tail)

    @staticmethod
    def empty() -> Stream[Any]:
        return End

    # ─── Inspection ──────────────────────────────────────────────────

    def is_empty(self) -> bool:
        return self is End

    def head_option(self) -> Opt[T]:
        """Force only the head cell. End yields Absent."""
        return Absent if self is End else Present(self.head.force())

    def match(self, *, link: Callable[[Lazy[T], Lazy[Stream[T]]], U], end: Callable[[], U]) -> U:
        """Exhaustive case analysis. `link` receives the unforced cells (callable to force)."""
        return end() if self is End else link(self.head, self.tail)

    # ─── Lazy Fold ───────────────────────────────────────────────────

    def fold_right(self, z: Callable[[], B], f: Callable[[T, Callable[[], B]], B]) -> B:
        """Non-strict right fold.

        f receives the forced head and the folded rest as a thunk. If f returns
        without touching the thunk, the tail is never visited. Returning the
        thunk itself, uncalled, is a tail call: the fold moves on to the next
        element in the same loop, so long runs cost no stack.

        Example:
            >>> from_(0).fold_right(lambda: -1, lambda a, rest: a if a > 2 else rest)
            3
        """
        return self._fold_cells(z, lambda cell, rest: f(cell.force(), rest))

    def _fold_cells(self, z: Callable[[], B], f: Callable[[Lazy[T], Callable[[], B]], B]) -> B:
        # Same fold over the unforced head cells; combinators that need not look at a head never force it
        cur = self
        while cur is not End:
            rest = _Rest(cur.tail, z, f)
            out = f(cur.head, rest)
            if out is not rest:
                return out
            cur = cur.tail.force()
        return z()

    def exists(self, pred: Callable[[T], bool]) -> bool:
        return bool(self.fold_right(lambda: False, lambda a, rest: pred(a) or rest))

    def for_all(self, pred: Callable[[T], bool]) -> bool:
        return bool(self.fold_right(lambda: True, lambda a, rest: pred(a) and rest))

    def map(self, f: Callable[[T], U]) -> Stream[U]:
        """Lazy per element: neither the source heads nor f run until a mapped head is forced."""
        return self._fold_cells(lambda: End, lambda cell, rest: Link(cell.map(f), Lazy(rest)))

    def append(self, other: Stream[T] | Callable[[], Stream[T]]) -> Stream[T]:
        """Concatenate; `other` (a stream or a thunk producing one) is forced only once this stream is exhausted."""
        tail = (lambda: other) if isinstance(other, Stream) else other
        return self._fold_cells(tail, lambda cell, rest: Link(cell, Lazy(rest)))

    def flat_map(self, f: Callable[[T], Stream[U]]) -> Stream[U]:
        def step(h: T, rest: Callable[[], Stream[U]]) -> Stream[U]:
            inner = f(h)
            return rest if inner is End else inner.append(rest)
        return self.fold_right(lambda: End, step)

    def filter(self, pred: Callable[[T], bool]) -> Stream[T]:
        """Keep matching elements. Runs of rejected elements are skipped in a loop, not by recursion."""
        cur = self
        while cur is not End and not pred(cur.head.force()):
            cur = cur.tail.force()
        if cur is End:
            return End
        return Link(cur.head, cur.tail.map(lambda t: t.filter(pred)))

    # ─── Slicing ─────────────────────────────────────────────────────

    def take(self, n: int) -> Stream[T]:
        """At most n elements. Shares the source head cells; forces nothing until consumed."""
        if n <= 0 or self is End:
            return End
        if n == 1:
            return Link(self.head, Lazy.now(End))
        return Link(self.head, self.tail.map(lambda t: t.take(n - 1)))

    def drop(self, n: int) -> Stream[T]:
        """Skip n elements, forcing tails but not the skipped heads."""
        cur = self
        while n > 0 and cur is not End:
            cur, n = cur.tail.force(), n - 1
        return cur

    def take_while(self, pred: Callable[[T], bool]) -> Stream[T]:
        if self is End or not pred(self.head.force()):
            return End
        return Link(self.head, self.tail.map(lambda t: t.take_while(pred)))

    # ─── Searching ───────────────────────────────────────────────────

    def find(self, pred: Callable[[T], bool]) -> Opt[T]:
        for x in self:
            if pred(x):
                return Present(x)
        return Absent

    def starts_with(self, prefix: Stream[T]) -> bool:
        """Whether `prefix` (which must be finite) is a prefix of this stream."""
        a, p = self, prefix
        while p is not End:
            if a is End or a.head.force() != p.head.force():
                return False
            a, p = a.tail.force(), p.tail.force()
        return True

    def zip_with(self, other: Stream[U], f: Callable[[T, U], B]) -> Stream[B]:
        """Pairwise combine, ending with the shorter stream."""
        def step(s: tuple[Stream[T], Stream[U]]) -> Opt[tuple[B, tuple[Stream[T], Stream[U]]]]:
            a, b = s
            if a is End or b is End:
                return Absent
            return Present((f(a.head.force(), b.head.force()), (a.tail.force(), b.tail.force())))
        return unfold((self, other), step)

    # ─── Conversion ──────────────────────────────────────────────────

    def to_list(self, limit: int | None = None) -> list[T]:
        """Materialize a finite stream.

        Raises:
            FaultException: STREAM_LIMIT if more than `limit` elements are present
        """
        bound = limit if limit is not None else get_settings().stream.materialize_limit
        out: list[T] = []
        cur = self
        while cur is not End:
            if len(out) >= bound:
                logger.debug("materialization bound hit", extra={"limit": bound})
                raise FaultException.create(
                    ErrorCode.STREAM_LIMIT,
                    f"stream has more than {bound} elements; to_list() requires a finite stream",
                    "Stream.to_list",
                )
            out.append(cur.head.force())
            cur = cur.tail.force()
        logger.debug("materialized stream", extra={"count": len(out)})
        return out

    def __iter__(self) -> Iterator[T]:
        """Pull elements on demand. Safe on infinite streams as long as the consumer stops."""
        cur = self
        while cur is not End:
            yield cur.head.force()
            cur = cur.tail.force()

    def __repr__(self) -> str:
        if self is End:
            return "End"
        head = repr(self.head.force()) if self.head.is_forced else "?"
        return f"Stream({head}, ...)"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Link(Stream[T]):
    """Non-empty stream node holding memoized head and tail cells."""

    head: Lazy[T]
    tail: Lazy[Stream[T]]


class _End(Stream[Any]):
    __slots__ = ()


End: Stream[Any] = _End()


class _Rest(Generic[T, B]):
    """Accumulator thunk for one fold step: calling it folds the remaining tail."""

    __slots__ = ("_tail", "_z", "_f")

    def __init__(self, tail: Lazy[Stream[T]], z: Callable[[], B], f: Callable[[Lazy[T], Callable[[], B]], B]) -> None:
        self._tail, self._z, self._f = tail, z, f

    def __call__(self) -> B:
        return self._tail.force()._fold_cells(self._z, self._f)


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors & Generators
# ═══════════════════════════════════════════════════════════════════════════════


def cons(head: Callable[[], T], tail: Callable[[], Stream[T]]) -> Stream[T]:
    """Smart constructor: both thunks are wrapped in memoizing cells."""
    return Link(_cell(head), _cell(tail))


def empty() -> Stream[Any]:
    return End


def from_iterable(items: Iterable[T]) -> Stream[T]:
    """Stream over any iterable, pulling one item per forced tail. Generators may be infinite."""
    it = iter(items)

    def pull() -> Stream[T]:
        for x in it:
            return Link(Lazy.now(x), Lazy(pull))
        return End

    return pull()


def unfold(seed: S, step: Callable[[S], Opt[tuple[T, S]]]) -> Stream[T]:
    """Corecursive generator: step once per produced element, never again after Absent.

    Example:
        >>> unfold(0, lambda n: Present((n, n + 1)) if n < 5 else Absent).to_list()
        [0, 1, 2, 3, 4]
    """
    return step(seed).match(
        present=lambda pair: Link(Lazy.now(pair[0]), Lazy(lambda: unfold(pair[1], step))),
        absent=lambda: End,
    )


def constant(value: T) -> Stream[T]:
    """Infinite stream of one value: a single node whose tail is itself."""
    node: Stream[T]
    node = Link(Lazy.now(value), Lazy(lambda: node))
    return node


def from_(n: int) -> Stream[int]:
    """n, n+1, n+2, ..."""
    return unfold(n, lambda s: Present((s, s + 1)))


def fibs() -> Stream[int]:
    """0, 1, 1, 2, 3, 5, ..."""
    return unfold((0, 1), lambda s: Present((s[0], (s[1], s[0] + s[1]))))
