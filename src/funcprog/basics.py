"""Loop-based recursion basics: absolute value, factorial, Fibonacci.

Each accumulator-passing recursion is written as a loop carrying the same
accumulators, so call depth is constant.
"""

from __future__ import annotations


def abs_value(n: int) -> int:
    return -n if n < 0 else n


def factorial(n: int) -> int:
    """n! with factorial(n) == 1 for n <= 0."""
    acc = 1
    while n > 0:
        n, acc = n - 1, n * acc
    return acc


def fibonacci(n: int) -> int:
    """0-indexed Fibonacci number: fibonacci(0) == 0, fibonacci(1) == 1, fibonacci(10) == 55."""
    prev_prev, prev = 0, 1
    for _ in range(n):
        prev_prev, prev = prev, prev_prev + prev
    return prev_prev
