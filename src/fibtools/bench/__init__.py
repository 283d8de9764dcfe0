from .timing import generate_bench

__all__ = ["generate_bench"]
