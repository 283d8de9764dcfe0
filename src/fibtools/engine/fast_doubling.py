from __future__ import annotations

from typing import Tuple


def fib_pair(n: int) -> Tuple[int, int]:
    """
    (F(n), F(n+1)) by fast doubling, with F(0) = 0, F(1) = 1.

    With m = n // 2 and (a, b) = (F(m), F(m+1)):
      F(2m)   = a * (2b - a)
      F(2m+1) = a^2 + b^2

    Recursion depth is the bit length of n.
    """
    if n < 0:
        raise ValueError(f"fast doubling needs n >= 0, got {n}")
    if n == 0:
        return 0, 1
    a, b = fib_pair(n >> 1)
    c = a * (2 * b - a)
    d = a * a + b * b
    if n & 1:
        return d, c + d
    return c, d


def fibonacci(n: int) -> int:
    """F(n) with F(0) = 0, F(1) = F(2) = 1."""
    return fib_pair(n)[0]
