"""Classic recursive routines: gcd, sums, factorial, Fibonacci, Hanoi."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


def _c_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _c_remainder(a, b)
    return a


def sum_natural(n: int) -> int:
    """Sum of the natural numbers 1..n, for n >= 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return n * (n + 1) // 2


def factorial(n: int) -> int:
    """n! for n >= 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(1) == fibonacci(2) == 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


@dataclass(frozen=True)
class Move:
    """One disc move between two pegs."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disc {self.disk} from {self.source} to {self.target}"


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[Move]:
    """Yield the moves of the recursive disc-moving scheme for ``n`` discs."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return _hanoi(n, source, target, spare)


def _hanoi(n: int, source: str, target: str, spare: str) -> Iterator[Move]:
    if n == 1:
        yield Move(n, source, target)
        return
    yield from _hanoi(n - 1, source, spare, target)
    yield Move(n, source, target)
    yield from _hanoi(n - 1, target, spare, source)