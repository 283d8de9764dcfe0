from __future__ import annotations

from typing import List, Optional, Sequence

from fibtools.errors import DimensionMismatch
from fibtools.utils.validation import validate_modulus


Matrix = List[List[int]]


def identity(k: int) -> Matrix:
    """k x k identity matrix."""
    return [[1 if i == j else 0 for j in range(k)] for i in range(k)]


def build_matrix(coeffs: Sequence[int]) -> Matrix:
    """
    Companion matrix of a linear recurrence.

    Row 0 holds the coefficients, the sub-diagonal holds 1s:

      build_matrix([1, 1]) = [[1, 1],
                              [1, 0]]
    """
    k = len(coeffs)
    if k == 0:
        raise DimensionMismatch("cannot build a companion matrix from empty coefficients")

    M = [[0] * k for _ in range(k)]
    for j in range(k):
        M[0][j] = int(coeffs[j])
    for i in range(1, k):
        M[i][i - 1] = 1
    return M


def _check_square(A: Sequence[Sequence[int]], k: int, name: str) -> None:
    if len(A) != k or any(len(row) != k for row in A):
        raise DimensionMismatch(f"{name} is not a {k}x{k} matrix")


def multiply(a: Matrix, b: Matrix, modulus: Optional[int] = None) -> Matrix:
    """
    Product a*b of two k x k matrices.

    With a modulus every product and every partial sum is reduced right away,
    so cell magnitudes stay below modulus**2 during exponentiation.
    """
    validate_modulus(modulus)
    k = len(a)
    _check_square(a, k, "left operand")
    _check_square(b, k, "right operand")

    out = [[0] * k for _ in range(k)]
    for i in range(k):
        row = a[i]
        for j in range(k):
            s = 0
            for l in range(k):
                prod = row[l] * b[l][j]
                if modulus is not None:
                    prod %= modulus
                s += prod
                if modulus is not None:
                    s %= modulus
            out[i][j] = s
    return out


def power(base: Matrix, exponent: int, modulus: Optional[int] = None) -> Matrix:
    """
    base**exponent by repeated squaring, O(log exponent) multiplications.

    The caller's matrix is left untouched; exponent 0 gives the identity.
    """
    if exponent < 0:
        raise ValueError(f"matrix exponent must be non-negative, got {exponent}")
    validate_modulus(modulus)
    k = len(base)
    _check_square(base, k, "base")

    result = identity(k)
    if modulus is not None:
        # identity(1) under modulus 1 is [[0]]
        result = [[x % modulus for x in row] for row in result]
    sq = [list(row) for row in base]
    e = exponent
    while e > 0:
        if e & 1:
            result = multiply(result, sq, modulus)
        e >>= 1
        if e:
            sq = multiply(sq, sq, modulus)
    return result
