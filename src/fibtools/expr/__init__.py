from .rpn import (
    BINARY_OPS,
    CompiledExpression,
    compile_expression,
    tokenize,
)

__all__ = [
    "BINARY_OPS",
    "CompiledExpression",
    "compile_expression",
    "tokenize",
]
