from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from fibtools.errors import DimensionMismatch
from fibtools.utils.validation import validate_modulus


class RecurrenceFunction(ABC):
    """
    "Next term given the window" for the sequential generator.

    The window is an immutable tuple of the most recent k terms, oldest first.
    """

    @abstractmethod
    def evaluate(self, window: Tuple[int, ...]) -> int:
        ...

    def __call__(self, window: Tuple[int, ...]) -> int:
        return self.evaluate(window)


@dataclass(frozen=True)
class CoefficientForm(RecurrenceFunction):
    """
    Linear combination of the window:

      next = coeffs[0]*window[k-1] + coeffs[1]*window[k-2] + ... + coeffs[k-1]*window[0]

    coeffs[j] multiplies the term j+1 positions back.
    """

    coeffs: Tuple[int, ...]
    modulus: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coeffs", tuple(int(c) for c in self.coeffs))
        validate_modulus(self.modulus)

    @property
    def order(self) -> int:
        return len(self.coeffs)

    def evaluate(self, window: Tuple[int, ...]) -> int:
        k = len(self.coeffs)
        if len(window) != k:
            raise DimensionMismatch(f"window has {len(window)} terms, recurrence order is {k}")
        m = self.modulus
        s = 0
        for j in range(k):
            s += self.coeffs[j] * window[k - 1 - j]
            if m is not None:
                s %= m
        return s
