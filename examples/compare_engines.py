#!/usr/bin/env python3
"""
Time the three ways of computing one Fibonacci term and check they agree:

  fast doubling   O(log n) big-int multiplications
  matrix power    O(k^3 log n)
  sequential      O(n) additions

Usage:
    python3 compare_engines.py [--max-exp 6]
"""
import argparse
import sys
import time

from fibtools.engine.fast_doubling import fibonacci
from fibtools.engine.nth_term import nth_term
from fibtools.engine.sequential import generate_term


def _timed(fn, *args):
    t0 = time.perf_counter()
    out = fn(*args)
    return out, time.perf_counter() - t0


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--max-exp", type=int, default=5, help="largest n is 10**max-exp")
    ap.add_argument("--seq-limit", type=int, default=200_000, help="skip sequential beyond this n")
    args = ap.parse_args()

    print(f"{'n':>10} {'fast':>10} {'matrix':>10} {'sequential':>12}")
    for e in range(1, args.max_exp + 1):
        n = 10**e
        fd, t_fd = _timed(fibonacci, n)
        mx, t_mx = _timed(nth_term, n, [1, 1], 2, [1, 1])
        if fd != mx:
            print(f"[n={n}] fast doubling and matrix disagree!", file=sys.stderr)
            sys.exit(1)

        seq_col = "-"
        if n <= args.seq_limit:
            sq, t_sq = _timed(generate_term, n - 2, [1, 1], 2, [1, 1])
            if sq != fd:
                print(f"[n={n}] sequential disagrees!", file=sys.stderr)
                sys.exit(1)
            seq_col = f"{t_sq:.4f}s"

        print(f"{n:>10} {t_fd:>9.4f}s {t_mx:>9.4f}s {seq_col:>12}")


if __name__ == "__main__":
    main()
