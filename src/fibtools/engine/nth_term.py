from __future__ import annotations

import os
from typing import Optional, Sequence

from fibtools.engine.fast_doubling import fibonacci
from fibtools.matrix.companion import build_matrix, power
from fibtools.utils.validation import validate_parameters


FIBTOOLS_FAST_DOUBLING = os.environ.get("FIBTOOLS_FAST_DOUBLING", "1")


def fast_doubling_enabled() -> bool:
    """Returns True unless FIBTOOLS_FAST_DOUBLING is set to 0/false/no/off."""
    return FIBTOOLS_FAST_DOUBLING.strip().lower() not in ("0", "false", "no", "off")


def is_canonical(
    init: Sequence[int],
    k: int,
    coeffs: Sequence[int],
    modulus: Optional[int] = None,
) -> bool:
    """True for the plain Fibonacci recurrence: k=2, coeffs=[1,1], init=[1,1], no modulus."""
    return (
        k == 2
        and modulus is None
        and list(coeffs) == [1, 1]
        and list(init) == [1, 1]
    )


def nth_term(
    n: int,
    init: Sequence[int],
    k: int,
    coeffs: Sequence[int],
    modulus: Optional[int] = None,
) -> int:
    """
    Term at 1-based position n via companion-matrix exponentiation.

    Positions 1..k are the seeds init[0..k-1]. Past the seeds,
    P = M^(n-k) advances the state [x_k, x_{k-1}, ..., x_1] to
    [x_n, ..., x_{n-k+1}], and the top entry is

      x_n = sum_i P[0][i] * init[k-1-i]

    Cost is O(k^3 log n). With a modulus every intermediate value is reduced.
    """
    validate_parameters(init, k, coeffs, modulus)
    if n < 1:
        raise ValueError(f"term index is 1-based, got n={n}")

    if n <= k:
        x = int(init[n - 1])
        return x % modulus if modulus is not None else x

    P = power(build_matrix(coeffs), n - k, modulus)
    result = 0
    for i in range(k):
        result += P[0][i] * int(init[k - 1 - i])
        if modulus is not None:
            result %= modulus
    return result


def term_at(
    n: int,
    init: Sequence[int],
    k: int,
    coeffs: Sequence[int],
    modulus: Optional[int] = None,
    *,
    fast: Optional[bool] = None,
) -> int:
    """
    nth_term, switching to fast doubling for the canonical Fibonacci case.

    fast=None defers to FIBTOOLS_FAST_DOUBLING. Both paths return the same value.
    """
    if fast is None:
        fast = fast_doubling_enabled()
    if fast and n >= 1 and is_canonical(init, k, coeffs, modulus):
        return fibonacci(n)
    return nth_term(n, init, k, coeffs, modulus)
