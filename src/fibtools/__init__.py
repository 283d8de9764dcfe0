"""
fibtools: terms of order-k linear recurrence sequences over Python ints,
via companion-matrix powers, Fibonacci fast doubling, sequential generation
and compiled RPN recurrence formulas.
"""

from .errors import FibError, DimensionMismatch, MalformedExpression, InvalidModulus
from .matrix.companion import build_matrix, identity, multiply, power
from .engine.fast_doubling import fib_pair, fibonacci
from .engine.nth_term import nth_term, term_at, is_canonical, fast_doubling_enabled
from .engine.recurrence import RecurrenceFunction, CoefficientForm
from .engine.sequential import generate_term, generate_sequence, iter_sequence
from .expr.rpn import CompiledExpression, compile_expression
from .utils.magnitude import approx_log10
from .utils.validation import validate_parameters, validate_expression_order
from .bench.timing import generate_bench

__all__ = [
    # Errors
    "FibError",
    "DimensionMismatch",
    "MalformedExpression",
    "InvalidModulus",
    # Matrix
    "build_matrix",
    "identity",
    "multiply",
    "power",
    # Engines
    "fib_pair",
    "fibonacci",
    "nth_term",
    "term_at",
    "is_canonical",
    "fast_doubling_enabled",
    "RecurrenceFunction",
    "CoefficientForm",
    "generate_term",
    "generate_sequence",
    "iter_sequence",
    # Expressions
    "CompiledExpression",
    "compile_expression",
    # Utils
    "approx_log10",
    "validate_parameters",
    "validate_expression_order",
    # Bench
    "generate_bench",
]
