"""
Command line front end:

    fib 10                         # 55
    fib 10 --list                  # first 2 + 10 terms
    fib 30 -i 0,0,1 -k 3 -m 1000   # tribonacci mod 1000
    fib 20 -f "a b * b +"          # custom RPN recurrence
    fib 0 --bench 1.5              # terms generated in 1.5 s
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from fibtools.bench.timing import generate_bench
from fibtools.engine.nth_term import term_at
from fibtools.engine.sequential import Recurrence, generate_sequence, generate_term
from fibtools.errors import FibError
from fibtools.expr.rpn import compile_expression
from fibtools.utils.validation import validate_parameters


def _int_list(text: str) -> List[int]:
    try:
        return [int(x.strip()) for x in text.split(",") if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {text!r}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fib",
        description="Terms of linear recurrence sequences, mostly Fibonacci.",
    )
    ap.add_argument("n", type=int, help="1-based index of the term (with --list: number of terms past the seeds)")
    ap.add_argument("-i", "--init", type=_int_list, default=[1, 1], help="comma-separated seed values, e.g. 1,1 (use --init=-1,2 for a leading minus)")
    ap.add_argument("-k", "--n-params", type=int, default=2, help="recurrence order (number of previous terms)")
    ap.add_argument("-c", "--coeffs", type=_int_list, default=None, help="comma-separated coefficients; default all ones")
    ap.add_argument("-m", "--mod", type=int, default=None, help="reduce every value modulo this")
    ap.add_argument("-l", "--list", action="store_true", help="print the whole sequence instead of one term")
    ap.add_argument("-f", "--func", type=str, default=None, help='recurrence in RPN over letters a.., e.g. "a b +"')
    ap.add_argument("-p", "--plot", action="store_true", help="plot log10 of the terms (needs --list)")
    ap.add_argument("--save", type=str, default=None, help="path to save the plot PNG instead of showing")
    ap.add_argument("-b", "--bench", type=float, default=None, help="count terms generated in this many seconds (n must be 0)")
    ap.add_argument("--no-fast", action="store_true", help="never use the fast-doubling shortcut")
    return ap


def _term_by_position(n: int, init: Sequence[int], k: int, fn: Recurrence, modulus: Optional[int]) -> int:
    if n < 1:
        raise ValueError(f"term index is 1-based, got n={n}")
    if n <= k:
        return generate_sequence(0, init, k, fn, modulus)[n - 1]
    return generate_term(n - k, init, k, fn, modulus)


def run(args: argparse.Namespace) -> int:
    k = args.n_params
    coeffs = args.coeffs if args.coeffs is not None else [1] * k
    validate_parameters(args.init, k, coeffs, args.mod)

    if args.plot and not args.list:
        raise FibError("only use plot with list!")

    recurrence: Recurrence = coeffs
    if args.func is not None:
        recurrence = compile_expression(args.func, order=k)

    if args.bench is not None:
        if args.n != 0:
            raise FibError("to use bench set n to zero!")
        count, elapsed = generate_bench(args.bench, args.init, k, recurrence, args.mod)
        print(f"Generated {count} numbers in {elapsed:.3f} seconds")
        return 0

    if args.list:
        seq = generate_sequence(args.n, args.init, k, recurrence, args.mod)
        if args.plot:
            from fibtools.viz.plot import plot_log10

            print(f"[plot] {len(seq)} terms", file=sys.stderr)
            plot_log10(seq, save_path=args.save)
            if args.save:
                print(f"Saved: {args.save}")
        else:
            print(seq)
        return 0

    if args.func is not None:
        print(_term_by_position(args.n, args.init, k, recurrence, args.mod))
    else:
        print(term_at(args.n, args.init, k, coeffs, args.mod, fast=False if args.no_fast else None))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    # terms routinely exceed the default 4300-digit str() limit
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)
    try:
        return run(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
