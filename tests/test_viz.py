"""Tests for fibtools.viz (matplotlib, Agg backend)."""
import matplotlib
import pytest

matplotlib.use("Agg")

from fibtools.engine.sequential import generate_sequence
from fibtools.viz.plot import log10_points, plot_log10, plot_max_bars


def test_log10_points_small():
    xs, ys = log10_points([1, 10, 100, 0])
    assert list(xs) == [0, 1, 2, 3]
    assert list(ys) == [0.0, 1.0, 2.0, 0.0]


def test_log10_points_downsamples():
    seq = generate_sequence(500, [1, 1], 2, [1, 1])
    xs, ys = log10_points(seq, max_bars=50)
    assert len(xs) <= 50
    assert xs[0] == 0
    assert xs[-1] == len(seq) - 1
    assert len(ys) == len(xs)


def test_log10_points_empty():
    xs, ys = log10_points([])
    assert len(xs) == 0 and len(ys) == 0


def test_plot_log10_saves_png(tmp_path):
    seq = generate_sequence(60, [1, 1], 2, [1, 1])
    out = tmp_path / "fib.png"
    ys = plot_log10(seq, save_path=str(out), title="fib")
    assert out.exists()
    assert len(ys) == len(seq)
    assert ys[-1] > ys[10]


def test_log10_points_keeps_first_and_last_for_tiny_limits():
    for limit in (0, 1, 2):
        xs, _ = log10_points([1, 2, 3, 4], max_bars=limit)
        assert list(xs) == [0, 3]


def test_plot_max_bars_env(monkeypatch):
    monkeypatch.setenv("FIBTOOLS_PLOT_MAX_BARS", "7")
    assert plot_max_bars() == 7
    seq = generate_sequence(100, [1, 1], 2, [1, 1])
    xs, _ = log10_points(seq)
    assert len(xs) <= 7


def test_plot_max_bars_env_invalid(monkeypatch):
    monkeypatch.setenv("FIBTOOLS_PLOT_MAX_BARS", "many")
    with pytest.raises(ValueError):
        plot_max_bars()
