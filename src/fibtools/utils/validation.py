from __future__ import annotations

from typing import Optional, Sequence

from fibtools.errors import DimensionMismatch, InvalidModulus


def validate_modulus(modulus: Optional[int]) -> None:
    """Raise InvalidModulus unless modulus is None or a positive int."""
    if modulus is None:
        return
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        raise InvalidModulus(f"modulus must be an integer, got {modulus!r}")
    if modulus <= 0:
        raise InvalidModulus(f"modulus must be positive, got {modulus}")


def validate_parameters(
    init: Sequence[int],
    k: int,
    coeffs: Optional[Sequence[int]] = None,
    modulus: Optional[int] = None,
) -> None:
    """
    Check the recurrence parameters before any engine runs.

    Raises DimensionMismatch if k < 1 or len(init) / len(coeffs) != k,
    InvalidModulus if modulus <= 0.
    """
    if k < 1:
        raise DimensionMismatch(f"recurrence order must be at least 1, got {k}")
    if len(init) != k:
        raise DimensionMismatch(
            f"length of the init vector ({len(init)}) has to be the same as n_params ({k})"
        )
    if coeffs is not None and len(coeffs) != k:
        raise DimensionMismatch(
            f"length of the coefficient vector ({len(coeffs)}) has to be the same as n_params ({k})"
        )
    validate_modulus(modulus)


def validate_expression_order(expression: str, k: int) -> None:
    """Raise MalformedExpression if *expression* does not compile for a window of k terms."""
    from fibtools.expr.rpn import compile_expression

    compile_expression(expression, order=k)
