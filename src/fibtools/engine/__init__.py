from .recurrence import RecurrenceFunction, CoefficientForm
from .fast_doubling import fib_pair, fibonacci
from .nth_term import fast_doubling_enabled, is_canonical, nth_term, term_at
from .sequential import as_recurrence, iter_sequence, generate_term, generate_sequence

__all__ = [
    "RecurrenceFunction",
    "CoefficientForm",
    "fib_pair",
    "fibonacci",
    "fast_doubling_enabled",
    "is_canonical",
    "nth_term",
    "term_at",
    "as_recurrence",
    "iter_sequence",
    "generate_term",
    "generate_sequence",
]
