"""
Plotting of sampled string states and real-time animation of a simulator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from ..pde.simulator import StringSimulator
from ..pde.state import U_T, U_X
from ..pde.utils import integrate_displacement, linspace_grid
from .matplotlib_backends import HAS_MATPLOTLIB, require_matplotlib, style_string_axes

if HAS_MATPLOTLIB:
    from matplotlib import pyplot as plt
    from matplotlib.animation import FuncAnimation


@dataclass(frozen=True)
class CurveView:
    """Visibility and stroke color of one plotted curve."""

    visible: bool = True
    color: str = "black"


DEFAULT_VIEWS: Dict[str, CurveView] = {
    "u": CurveView(visible=False, color="tab:green"),
    "u_x": CurveView(visible=True, color="tab:blue"),
    "u_t": CurveView(visible=True, color="tab:red"),
}


def _curves(state: np.ndarray, length: float) -> Dict[str, np.ndarray]:
    return {
        "u": integrate_displacement(state, length),
        "u_x": state[:, U_X],
        "u_t": state[:, U_T],
    }


def plot_string_state(
    state: np.ndarray,
    length: float,
    ax=None,
    u_view: Optional[CurveView] = None,
    u_x_view: Optional[CurveView] = None,
    u_t_view: Optional[CurveView] = None,
):
    """
    Plot the curves of a state array along the string.

    Parameters
    ----------
    state:
        Array of shape (n, 2) holding ``(u_t, u_x)``.
    length:
        String length ``L``; samples are placed evenly on ``[0, L]``.
    ax:
        Matplotlib axes to plot on. If None, creates a new figure.
    u_view / u_x_view / u_t_view:
        Visibility and color of the displacement, ``u_x`` and ``u_t``
        curves. Defaults show ``u_x`` and ``u_t`` only.

    Returns
    -------
    matplotlib.axes.Axes
        The axes object used for plotting.

    Raises
    ------
    RuntimeError
        If matplotlib is not installed.
    """
    require_matplotlib()

    state = np.asarray(state, dtype=float)
    if state.ndim != 2 or state.shape[1] != 2:
        raise ValueError(f"state must have shape (n, 2), got {state.shape}.")

    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5))
    style_string_axes(ax, length)

    views = {
        "u": u_view or DEFAULT_VIEWS["u"],
        "u_x": u_x_view or DEFAULT_VIEWS["u_x"],
        "u_t": u_t_view or DEFAULT_VIEWS["u_t"],
    }
    x = linspace_grid(0.0, length, state.shape[0])
    for name, values in _curves(state, length).items():
        view = views[name]
        if view.visible:
            ax.plot(x, values, color=view.color, label=name)

    return ax


class StringAnimator:
    """
    Drive a `StringSimulator` in real time and redraw its curves.

    Each frame advances the simulator by the frame interval in seconds and
    updates the line data of the visible curves.
    """

    def __init__(
        self,
        simulator: StringSimulator,
        ax=None,
        interval_ms: float = 1000.0 / 60.0,
        views: Optional[Dict[str, CurveView]] = None,
    ) -> None:
        require_matplotlib()
        if interval_ms <= 0.0:
            raise ValueError("interval_ms must be positive.")

        self.simulator = simulator
        self.interval_ms = float(interval_ms)
        self.views = dict(DEFAULT_VIEWS)
        if views:
            self.views.update(views)

        if ax is None:
            _, ax = plt.subplots(figsize=(5, 5))
        self.ax = style_string_axes(ax, simulator.length)

        x = simulator.grid
        curves = _curves(simulator.state, simulator.length)
        self.lines = {}
        for name, view in self.views.items():
            if view.visible:
                (line,) = ax.plot(x, curves[name], color=view.color, label=name)
                self.lines[name] = line

    def update(self, frame: int):
        """Advance one frame interval and refresh the lines."""
        sim = self.simulator
        sim.advance(self.interval_ms / 1000.0)
        curves = _curves(sim.state, sim.length)
        if any(len(line.get_xdata()) != sim.num_points for line in self.lines.values()):
            # The grid changed under a reset.
            x = sim.grid
            for name, line in self.lines.items():
                line.set_data(x, curves[name])
            self.ax.set_xlim(0.0, sim.length)
            self.ax.set_ylim(-0.5 * sim.length, 0.5 * sim.length)
        else:
            for name, line in self.lines.items():
                line.set_ydata(curves[name])
        return list(self.lines.values())

    def animate(self, frames: Optional[int] = None):
        """Return a FuncAnimation calling `update` every `interval_ms`."""
        return FuncAnimation(
            self.ax.figure,
            self.update,
            frames=frames,
            interval=self.interval_ms,
            blit=False,
            cache_frame_data=False,
        )
