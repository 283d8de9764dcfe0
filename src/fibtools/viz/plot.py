from __future__ import annotations

import os
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from fibtools.utils.magnitude import approx_log10


DEFAULT_MAX_BARS = 2000


def plot_max_bars() -> int:
    """Bar limit from FIBTOOLS_PLOT_MAX_BARS (default 2000), read at call time."""
    raw = os.environ.get("FIBTOOLS_PLOT_MAX_BARS", str(DEFAULT_MAX_BARS))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"FIBTOOLS_PLOT_MAX_BARS must be an integer, got {raw!r}")


def log10_points(seq: Sequence[int], max_bars: Optional[int] = None) -> tuple[np.ndarray, np.ndarray]:
    """
    (x, y) arrays for a log10 plot: x is the term index, y = approx_log10(term).

    Sequences longer than max_bars are sampled at evenly spaced indices.
    max_bars is clamped to at least 2 so the first and last terms are always
    kept. Zero terms plot at 0.
    """
    if max_bars is None:
        max_bars = plot_max_bars()
    max_bars = max(max_bars, 2)
    n = len(seq)
    if n == 0:
        return np.zeros(0, dtype=np.int64), np.zeros(0, dtype=np.float64)

    if n > max_bars:
        xs = np.unique(np.linspace(0, n - 1, num=max_bars).round().astype(np.int64))
    else:
        xs = np.arange(n, dtype=np.int64)

    ys = np.fromiter((approx_log10(seq[int(i)]) for i in xs), dtype=np.float64, count=len(xs))
    ys[np.isneginf(ys)] = 0.0
    return xs, ys


def plot_log10(
    seq: Sequence[int],
    *,
    save_path: str | None = None,
    title: str | None = None,
    max_bars: int | None = None,
) -> np.ndarray:
    """
    Bar chart of log10(term) against index.

    If save_path is set the figure is written there (PNG) and closed,
    otherwise it is shown. Returns the plotted y-values.
    """
    xs, ys = log10_points(seq, max_bars=max_bars)

    fig, ax = plt.subplots(figsize=(12, 4))
    ax.bar(xs, ys, width=1.0)
    ax.set_xlabel("index")
    ax.set_ylabel("log10(value)")
    ax.set_title(title or f"{len(seq)} terms")
    ax.set_xlim(0, max(len(seq), 1))

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()

    return ys
