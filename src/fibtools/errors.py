"""Typed failures raised by the recurrence engines."""
from __future__ import annotations


class FibError(ValueError):
    """Base class for invalid recurrence parameters or expressions."""


class DimensionMismatch(FibError):
    """init/coeffs length differs from the recurrence order (or k < 1)."""


class MalformedExpression(FibError):
    """An RPN expression could not be compiled or evaluated."""


class InvalidModulus(FibError):
    """Modulus was supplied but is not a positive integer."""
