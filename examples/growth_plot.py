#!/usr/bin/env python3
"""
Plot log10 of a recurrence prefix and estimate its growth rate.

For a recurrence with a dominant root r, log10(x_n) is asymptotically
linear in n with slope log10(r). A least-squares fit over the tail of the
prefix recovers r (golden ratio 1.618... for Fibonacci).

Usage:
    python3 growth_plot.py --n 400 --save fib.png
    python3 growth_plot.py --n 300 --init 0,0,1 --coeffs 1,1,1
"""
import argparse

import numpy as np

from fibtools.engine.sequential import generate_sequence
from fibtools.viz.plot import log10_points, plot_log10


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=300, help="terms past the seeds")
    ap.add_argument("--init", type=str, default="1,1")
    ap.add_argument("--coeffs", type=str, default=None, help="default: all ones")
    ap.add_argument("--tail", type=float, default=0.5, help="fraction of the prefix used for the fit")
    ap.add_argument("--save", type=str, default=None, help="path to save PNG instead of showing")
    args = ap.parse_args()

    init = [int(x) for x in args.init.split(",")]
    k = len(init)
    coeffs = [int(x) for x in args.coeffs.split(",")] if args.coeffs else [1] * k

    seq = generate_sequence(args.n, init, k, coeffs)
    xs, ys = log10_points(seq, max_bars=len(seq))

    start = int(len(xs) * (1.0 - args.tail))
    slope, intercept = np.polyfit(xs[start:], ys[start:], 1)
    print(f"k={k} coeffs={coeffs} init={init} terms={len(seq)}")
    print(f"log10 slope = {slope:.12f}  ->  growth ratio ~ {10 ** slope:.12f}")
    print(f"last term has {len(str(abs(seq[-1])))} digits")

    plot_log10(seq, save_path=args.save, title=f"coeffs={coeffs} init={init}")
    if args.save:
        print(f"Saved: {args.save}")


if __name__ == "__main__":
    main()
