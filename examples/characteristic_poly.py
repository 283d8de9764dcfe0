#!/usr/bin/env python3
"""
Characteristic polynomial and dominant root of a recurrence's companion matrix.

The companion matrix of x_n = c_1 x_{n-1} + ... + c_k x_{n-k} has
characteristic polynomial t^k - c_1 t^{k-1} - ... - c_k. Its root of
largest modulus governs growth, so the ratio x_{n+1}/x_n of a generic
prefix should approach it.

Usage:
    python3 characteristic_poly.py --coeffs 1,1,1 --init 0,0,1
"""
import argparse
from fractions import Fraction

from sympy import Matrix, Poly, Symbol

from fibtools.engine.nth_term import nth_term
from fibtools.matrix.companion import build_matrix


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--coeffs", type=str, default="1,1")
    ap.add_argument("--init", type=str, default=None, help="default: 1,...,1")
    ap.add_argument("--n", type=int, default=200, help="index used for the ratio check")
    args = ap.parse_args()

    coeffs = [int(x) for x in args.coeffs.split(",")]
    k = len(coeffs)
    init = [int(x) for x in args.init.split(",")] if args.init else [1] * k

    t = Symbol("t")
    M = Matrix(build_matrix(coeffs))
    p = M.charpoly(t)
    print(f"companion matrix: {build_matrix(coeffs)}")
    print(f"characteristic polynomial: {p.as_expr()}")

    roots = Poly(p.as_expr(), t).nroots(n=20)
    dominant = max(roots, key=lambda r: abs(complex(r)))
    print(f"dominant root: {dominant}")

    a = nth_term(args.n, init, k, coeffs)
    b = nth_term(args.n + 1, init, k, coeffs)
    if a != 0:
        ratio = Fraction(b, a)
        print(f"x_{args.n + 1} / x_{args.n} = {float(ratio):.15f}")


if __name__ == "__main__":
    main()
