from .plot import log10_points, plot_log10

__all__ = [
    "log10_points",
    "plot_log10",
]
