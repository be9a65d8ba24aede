"""Optional container: a value that may be absent, without None as a sentinel.

Implements a two-variant sum type with the fold-based combinator vocabulary:
- Functor: map
- Monad: flat_map
- Applicative-style combination: map2
- Collection operations: sequence, traverse

Absence is data, not a fault. The only operation that can raise is get(),
which exists for callers that have already established presence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from ..foundation.errors import ErrorCode, FaultException

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

_PRESENT = True
_ABSENT = False


class Opt(Generic[T]):
    """Discriminated union representing a present value or its absence.

    Examples:
        >>> Present(21).map(lambda x: x * 2)
        Present(42)
        >>> Absent.map(lambda x: x * 2)
        Absent
        >>> Absent.get_or_else(lambda: 0)
        0
        >>> Present(4).filter(lambda x: x % 2 == 1)
        Absent
    """

    __slots__ = ("_value", "_present")
    __match_args__ = ("_value", "_present")

    def __init__(self, value: T | None, present: bool) -> None:
        """Private constructor. Use Present() or the Absent singleton instead."""
        self._value = value
        self._present = present

    @staticmethod
    def of(value: T | None) -> Opt[T]:
        """Bridge from nullable values: None becomes Absent."""
        return Absent if value is None else Opt(value, _PRESENT)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_present(self) -> bool:
        return self._present

    def is_absent(self) -> bool:
        return not self._present

    # ─── Value Extraction ────────────────────────────────────────────

    def get(self) -> T:
        """Extract the value.

        Raises:
            FaultException: ABSENT_VALUE if called on Absent
        """
        if self._present:
            return cast(T, self._value)
        raise FaultException.create(ErrorCode.ABSENT_VALUE, "Called get() on Absent", "Opt.get")

    def get_or_else(self, default: Callable[[], T]) -> T:
        """Extract the value or compute a fallback. `default` runs only on the absent path."""
        return cast(T, self._value) if self._present else default()

    def or_else(self, alt: Callable[[], Opt[T]]) -> Opt[T]:
        """Return self if present, else the lazily computed alternative."""
        return self if self._present else alt()

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Opt[U]:
        """Apply f to the value if present. Type signature: Opt[T] -> (T -> U) -> Opt[U]"""
        return Opt(f(cast(T, self._value)), _PRESENT) if self._present else Absent

    def flat_map(self, f: Callable[[T], Opt[U]]) -> Opt[U]:
        """Chain a step that may itself be absent. Absent short-circuits without calling f."""
        return f(cast(T, self._value)) if self._present else Absent

    def filter(self, pred: Callable[[T], bool]) -> Opt[T]:
        return self if self._present and pred(cast(T, self._value)) else Absent

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, present: Callable[[T], U], absent: Callable[[], U]) -> U:
        """Exhaustive case analysis over both variants.

        Example:
            >>> Present(3).match(present=lambda x: f"got {x}", absent=lambda: "nothing")
            'got 3'
        """
        return present(cast(T, self._value)) if self._present else absent()

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._present  # noqa: E731
    __hash__ = lambda self: hash((self._present, self._value))  # noqa: E731
    __repr__ = lambda self: f"Present({self._value!r})" if self._present else "Absent"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Opt):
            return NotImplemented
        return self._present == other._present and (not self._present or self._value == other._value)

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields the value if present, nothing if absent."""
        if self._present:
            yield cast(T, self._value)


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Present(value: T) -> Opt[T]:  # noqa: N802
    """Construct the present variant. Present(None) is a legitimate present value."""
    return Opt(value, _PRESENT)


Absent: Opt = Opt(None, _ABSENT)


# ═══════════════════════════════════════════════════════════════════════════════
# Combination & Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def map2(a: Opt[T], b: Opt[U], f: Callable[[T, U], V]) -> Opt[V]:
    """Combine two optionals with f. Absent if either input is absent."""
    return a.flat_map(lambda x: b.map(lambda y: f(x, y)))


def lift(f: Callable[[T], U]) -> Callable[[Opt[T]], Opt[U]]:
    """Lift an ordinary function to operate on optionals."""
    return lambda o: o.map(f)


def sequence(opts: Iterable[Opt[T]]) -> Opt[list[T]]:
    """[Opt[T]] -> Opt[[T]]. Stops at the first Absent; later elements are not inspected.

    Example:
        >>> sequence([Present(1), Present(2)])
        Present([1, 2])
        >>> sequence([Present(1), Absent, Present(3)])
        Absent
    """
    values: list[T] = []
    for o in opts:
        if not o._present:
            return Absent
        values.append(cast(T, o._value))
    return Opt(values, _PRESENT)


def traverse(items: Iterable[T], f: Callable[[T], Opt[U]]) -> Opt[list[U]]:
    """Map f over items and sequence in one pass. f is not called after the first Absent."""
    values: list[U] = []
    for item in items:
        o = f(item)
        if not o._present:
            return Absent
        values.append(cast(U, o._value))
    return Opt(values, _PRESENT)


# ═══════════════════════════════════════════════════════════════════════════════
# Total Statistics
# ═══════════════════════════════════════════════════════════════════════════════


def mean(xs: Sequence[float]) -> Opt[float]:
    """Arithmetic mean, Absent for an empty sequence."""
    return Opt(sum(xs) / len(xs), _PRESENT) if xs else Absent


def variance(xs: Sequence[float]) -> Opt[float]:
    """Population variance: mean of squared deviations from the mean."""
    return mean(xs).flat_map(lambda m: mean([(x - m) ** 2 for x in xs]))
