from .magnitude import approx_log10
from .validation import validate_expression_order, validate_modulus, validate_parameters

__all__ = [
    "approx_log10",
    "validate_expression_order",
    "validate_modulus",
    "validate_parameters",
]
