"""Deferred computation cells.

A Lazy wraps a zero-argument thunk. force() runs the thunk on first demand and
caches the result; every later force() returns the very same object without
re-running anything. Streams build their head and tail out of these cells.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_UNSET: object = object()


class Lazy(Generic[T]):
    """Memoizing thunk cell.

    Example:
        >>> calls = []
        >>> cell = Lazy(lambda: calls.append(1) or 42)
        >>> cell.force(), cell.force(), len(calls)
        (42, 42, 1)
    """

    __slots__ = ("_thunk", "_value")

    def __init__(self, thunk: Callable[[], T]) -> None:
        self._thunk: Callable[[], T] | None = thunk
        self._value: object = _UNSET

    @classmethod
    def now(cls, value: T) -> Lazy[T]:
        """An already-forced cell holding value."""
        cell: Lazy[T] = cls.__new__(cls)
        cell._thunk, cell._value = None, value
        return cell

    @property
    def is_forced(self) -> bool:
        return self._value is not _UNSET

    def force(self) -> T:
        if self._value is _UNSET:
            thunk, self._thunk = self._thunk, None  # release the closure once evaluated
            try:
                self._value = thunk()  # type: ignore[misc]
            except BaseException:
                self._thunk = thunk
                raise
        return self._value  # type: ignore[return-value]

    __call__ = force

    def map(self, f: Callable[[T], U]) -> Lazy[U]:
        """Deferred transform; forcing the result forces this cell."""
        return Lazy(lambda: f(self.force()))

    def __repr__(self) -> str:
        return f"Lazy({self._value!r})" if self.is_forced else "Lazy(<unforced>)"


def lazy_if(cond: bool, on_true: Callable[[], T], on_false: Callable[[], T]) -> T:
    """Conditional whose branches are thunks; only the chosen branch is evaluated.

    Example:
        >>> lazy_if(False, lambda: 1 // 0, lambda: 3)
        3
    """
    return on_true() if cond else on_false()
