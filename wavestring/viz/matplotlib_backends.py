"""Optional matplotlib styling helpers for string plots.

Matplotlib is an optional dependency; the helpers raise RuntimeError when it
is not installed.
"""

from __future__ import annotations

from typing import Tuple

try:
    from matplotlib import pyplot as plt
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def require_matplotlib() -> None:
    """Raise RuntimeError if matplotlib is not installed."""
    if not HAS_MATPLOTLIB:
        raise RuntimeError(
            "matplotlib required for plotting; install with pip install matplotlib"
        )


def style_string_axes(ax: "Axes", length: float) -> "Axes":
    """
    Apply the string plot layout to `ax`.

    The horizontal range is the string ``[0, L]`` and the vertical range is
    ``[-L/2, L/2]`` so that slopes keep their aspect.
    """
    ax.set_xlim(0.0, length)
    ax.set_ylim(-0.5 * length, 0.5 * length)
    ax.set_xlabel("x", fontsize=12)
    ax.grid(True, alpha=0.3)
    ax.axhline(y=0, color="k", linestyle="-", linewidth=0.5)
    return ax


def create_string_figure(length: float, size: int = 5) -> Tuple["Figure", "Axes"]:
    """
    Create a square figure with axes styled for a string of `length`.

    Raises
    ------
    RuntimeError
        If matplotlib is not installed.
    """
    require_matplotlib()

    fig, ax = plt.subplots(figsize=(size, size))
    style_string_axes(ax, length)
    return fig, ax
