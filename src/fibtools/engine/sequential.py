from __future__ import annotations

from collections import deque
from collections.abc import Sequence as SequenceABC
from typing import Iterator, List, Optional, Sequence, Union

from fibtools.engine.recurrence import CoefficientForm, RecurrenceFunction
from fibtools.errors import DimensionMismatch
from fibtools.utils.validation import validate_parameters


Recurrence = Union[RecurrenceFunction, Sequence[int]]


def as_recurrence(recurrence: Recurrence, k: int, modulus: Optional[int] = None) -> RecurrenceFunction:
    """
    Normalize the recurrence argument.

    A plain sequence of ints is taken as coefficients and must have length k.
    """
    if isinstance(recurrence, RecurrenceFunction):
        if isinstance(recurrence, CoefficientForm) and recurrence.order != k:
            raise DimensionMismatch(
                f"coefficient form has order {recurrence.order}, expected {k}"
            )
        return recurrence
    if isinstance(recurrence, SequenceABC) and not isinstance(recurrence, (str, bytes)):
        validate_parameters([0] * k, k, recurrence, modulus)
        return CoefficientForm(tuple(recurrence), modulus)
    raise TypeError(
        "recurrence must be a RecurrenceFunction or a sequence of coefficients, "
        f"got {type(recurrence).__name__}"
    )


def iter_sequence(
    init: Sequence[int],
    k: int,
    recurrence: Recurrence,
    modulus: Optional[int] = None,
) -> Iterator[int]:
    """
    Iterator over the seeds, then new terms forever.

    The window is a deque(maxlen=k): appending a term evicts the oldest.
    Each recurrence call sees an immutable snapshot of the window.
    """
    validate_parameters(init, k, None, modulus)
    fn = as_recurrence(recurrence, k, modulus)
    seeds = [int(x) % modulus if modulus is not None else int(x) for x in init]
    return _run(seeds, k, fn, modulus)


def _run(
    seeds: List[int],
    k: int,
    fn: RecurrenceFunction,
    modulus: Optional[int],
) -> Iterator[int]:
    window = deque(seeds, maxlen=k)
    yield from seeds
    while True:
        nxt = fn(tuple(window))
        if modulus is not None:
            nxt %= modulus
        window.append(nxt)
        yield nxt


def _check_steps(n: int) -> None:
    if n < 0:
        raise ValueError(f"number of steps must be non-negative, got n={n}")


def generate_term(
    n: int,
    init: Sequence[int],
    k: int,
    recurrence: Recurrence,
    modulus: Optional[int] = None,
) -> int:
    """
    Run n steps past the seeds and return the last value, in O(n).

    n=0 returns the last seed. Only the k-term window is kept.
    """
    _check_steps(n)
    last = 0
    for i, x in enumerate(iter_sequence(init, k, recurrence, modulus)):
        last = x
        if i == k - 1 + n:
            break
    return last


def generate_sequence(
    n: int,
    init: Sequence[int],
    k: int,
    recurrence: Recurrence,
    modulus: Optional[int] = None,
) -> List[int]:
    """
    Seeds followed by n generated terms (k + n values).

    n counts steps past the seeds, not the index of the last term:
    generate_sequence(4, [0, 1], 2, [1, 1]) == [0, 1, 1, 2, 3, 5].
    """
    _check_steps(n)
    seq: List[int] = []
    for x in iter_sequence(init, k, recurrence, modulus):
        seq.append(x)
        if len(seq) == k + n:
            break
    return seq
