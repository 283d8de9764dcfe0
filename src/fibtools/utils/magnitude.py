from __future__ import annotations

import math

MANTISSA_DIGITS = 15

# Above this many bits, drop low decimal digits before calling str(); recent
# interpreters refuse str() on ints with more than 4300 digits.
_SHIFT_BITS = 4096


def _leading_digits(value: int) -> tuple[str, int]:
    """(decimal prefix of at least MANTISSA_DIGITS digits, total digit count) of value >= 0."""
    if value.bit_length() <= _SHIFT_BITS:
        s = str(value)
        return s, len(s)
    dropped = int(value.bit_length() * math.log10(2)) - 2 * MANTISSA_DIGITS
    s = str(value // 10**dropped)
    return s, len(s) + dropped


def approx_log10(value: int) -> float:
    """Approximate log10(|value|) without a full-precision logarithm.

    The first 15 decimal digits are parsed as a float and the remaining digit
    count is added on, so the result is exact up to 15 digits and close
    enough for plotting beyond that. Zero maps to -inf.
    """
    v = abs(int(value))
    if v == 0:
        return float("-inf")
    digits, count = _leading_digits(v)
    leading = float(digits[:MANTISSA_DIGITS])
    extra = count - MANTISSA_DIGITS if count > MANTISSA_DIGITS else 0
    return math.log10(leading) + extra
