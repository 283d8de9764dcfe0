from .companion import Matrix, build_matrix, identity, multiply, power

__all__ = [
    "Matrix",
    "build_matrix",
    "identity",
    "multiply",
    "power",
]
