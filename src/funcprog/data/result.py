"""Disjoint-result container: a success value or a tagged error.

Same combinator shapes as Opt, but the failing path carries a payload:
- Functor: map, map_err
- Monad: flat_map (bind)
- Applicative-style combination: map2 (left error wins)
- Collection operations: sequence, traverse (first error wins)
- Bridge from raising APIs: attempt

Errors propagate through every combinator untouched; no combinator inspects them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from ..foundation.errors import ErrorCode, FaultException, classify_exception
from .option import Absent, Opt, Present

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger("funcprog.result")

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")
V = TypeVar("V")
F = TypeVar("F")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(84)
        >>> Err("fail").map(lambda x: x * 2)
        Err('fail')
        >>> Ok(5).flat_map(lambda x: Ok(x * 2) if x > 0 else Err("neg"))
        Ok(10)
        >>> match Err("boom"):
        ...     case Result(value, True): print("ok", value)
        ...     case Result(error): print("err", error)
        err boom
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value", "_is_ok")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value.

        Raises:
            FaultException: UNWRAP_ERR if Result is Err
        """
        if self._is_ok:
            return cast(T, self._value)
        raise FaultException.create(ErrorCode.UNWRAP_ERR, f"Called unwrap() on Err value: {self._value!r}", "Result.unwrap")

    def unwrap_err(self) -> E:
        """Extract Err value.

        Raises:
            FaultException: UNWRAP_OK if Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise FaultException.create(ErrorCode.UNWRAP_OK, f"Called unwrap_err() on Ok value: {self._value!r}", "Result.unwrap_err")

    def get_or_else(self, default: Callable[[], T]) -> T:
        """Extract Ok value or compute a fallback; `default` runs only on Err."""
        return cast(T, self._value) if self._is_ok else default()

    def to_opt(self) -> Opt[T]:
        """Forget the error: Ok(x) -> Present(x), Err(_) -> Absent."""
        return Present(cast(T, self._value)) if self._is_ok else Absent

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value, propagate Err unchanged. Result[T,E] -> (T -> U) -> Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error, preserve Ok values."""
        return self if self._is_ok else Result(f(self._value), _ERR)  # type: ignore[arg-type,return-value]

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: chain a step that can fail. Err short-circuits without calling f.

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     return Ok(int(s)) if s.isdigit() else Err(f"invalid int: {s}")
            >>> Ok("42").flat_map(parse_int)
            Ok(42)
        """
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def or_else(self, alt: Callable[[], Result[T, F]]) -> Result[T, F]:
        """Return self if Ok, else the lazily computed alternative."""
        return self if self._is_ok else alt()  # type: ignore[return-value]

    def recover(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Like or_else, but the alternative sees the error."""
        return self if self._is_ok else f(self._value)  # type: ignore[arg-type,return-value]

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis over both variants.

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")
            'success: 42'
        """
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


def attempt(thunk: Callable[[], T]) -> Result[T, Exception]:
    """Run a computation that may raise; capture the exception as the Err payload.

    Example:
        >>> attempt(lambda: int("42"))
        Ok(42)
        >>> attempt(lambda: 1 // 0).is_err()
        True
    """
    try:
        return Result(thunk(), _OK)
    except Exception as exc:
        logger.debug("captured %s as Err", type(exc).__name__, extra={"code": str(classify_exception(exc))})
        return Result(exc, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Combination & Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def map2(a: Result[T, E], b: Result[U, E], f: Callable[[T, U], V]) -> Result[V, E]:
    """Combine two results with f. On failure the left operand's error is reported first."""
    if not a._is_ok:
        return a  # type: ignore[return-value]
    if not b._is_ok:
        return b  # type: ignore[return-value]
    return Result(f(a._value, b._value), _OK)  # type: ignore[arg-type]


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """[Result[T,E]] -> Result[[T], E]. Fail-fast on the first Err in left-to-right order."""
    values: list[T] = []
    for r in results:
        if not r._is_ok:
            return r  # type: ignore[return-value]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items, sequence results in one pass. Fail-fast on first Err."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if not r._is_ok:
            return r  # type: ignore[return-value]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast)."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        (values if r._is_ok else errors).append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK) if not errors else Result(errors, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Total Arithmetic
# ═══════════════════════════════════════════════════════════════════════════════


def mean(xs: Sequence[float]) -> Result[float, str]:
    """Arithmetic mean, with a message instead of a fault on empty input."""
    return Result(sum(xs) / len(xs), _OK) if xs else Result("mean of empty list!", _ERR)


def safe_div(x: float, y: float) -> Result[float, Exception]:
    """x / y with ZeroDivisionError captured as Err."""
    return attempt(lambda: x / y)
