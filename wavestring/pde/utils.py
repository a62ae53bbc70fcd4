"""
Grid helpers for the string solver: tabulation sizing, time steps, sampling
of initial conditions and reconstruction of the displacement.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .boundary import RealFunction
from .state import U_T, U_X, empty_state

# Lower bound on discrete steps per simulated second.
MIN_FRAMERATE = 60.0
MIN_TABULATION_SIZE = 257


def validate_string_parameters(wave_speed: float, length: float) -> None:
    """Raise ValueError unless the wave speed and length are finite and positive."""
    for name, value in (("wave_speed", wave_speed), ("length", length)):
        if not math.isfinite(value) or value <= 0.0:
            raise ValueError(f"{name} must be finite and positive, got {value!r}.")


def tabulation_size(
    wave_speed: float,
    length: float,
    min_framerate: float = MIN_FRAMERATE,
    min_size: int = MIN_TABULATION_SIZE,
) -> int:
    """
    Return the number of samples ``n`` along the string.

    ``n = max(min_size, ceil(2 L / a * min_framerate + 1))`` so that the step
    ``2 L / (a (n - 1))`` never exceeds ``1 / min_framerate``.
    """
    validate_string_parameters(wave_speed, length)
    return max(int(min_size), math.ceil(2.0 * length / wave_speed * min_framerate + 1.0))


def step_dt(wave_speed: float, length: float, n: int) -> float:
    """Return the clock increment ``2 L / (a (n - 1))`` of one step."""
    if n < 2:
        raise ValueError("n must be at least 2 to define a time step.")
    return 2.0 * length / (wave_speed * (n - 1))


def compute_cfl(dx: float, dt: float, wave_speed: float) -> float:
    """Return the Courant–Friedrichs–Lewy number |c| dt / dx."""
    if dx <= 0.0 or dt <= 0.0:
        raise ValueError("dx and dt must be positive.")
    return abs(wave_speed) * dt / dx


def linspace_grid(x0: float, x1: float, nx: int) -> np.ndarray:
    """Create a uniform grid with `nx` points between `x0` and `x1`."""
    if nx < 2:
        raise ValueError("nx must be at least 2 to form a grid.")
    return np.linspace(float(x0), float(x1), int(nx))


def tabulate(
    initial_u_x: RealFunction,
    initial_u_t: RealFunction,
    wave_speed: float,
    length: float,
    min_framerate: float = MIN_FRAMERATE,
    min_size: int = MIN_TABULATION_SIZE,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the initial derivatives along the string.

    Parameters
    ----------
    initial_u_x / initial_u_t:
        Callables of the position returning ``u_x(x, 0)`` and ``u_t(x, 0)``.
        They are called once per sample with a Python float; any exception
        they raise propagates.
    wave_speed, length:
        String parameters, both finite and positive.

    Returns
    -------
    (state, scratch):
        The initial state of shape (n, 2) and a zeroed array of the same
        shape for double buffering.
    """
    n = tabulation_size(wave_speed, length, min_framerate, min_size)
    grid = linspace_grid(0.0, length, n)

    state = empty_state(n)
    for i, x in enumerate(grid.tolist()):
        state[i, U_T] = float(initial_u_t(x))
        state[i, U_X] = float(initial_u_x(x))

    return state, empty_state(n)


def integrate_displacement(
    state: np.ndarray, length: float, offset: float = 0.0
) -> np.ndarray:
    """
    Reconstruct the displacement ``u(x)`` from the sampled ``u_x``.

    Uses the cumulative trapezoid rule; ``u(0) = offset``.
    """
    u_x = np.asarray(state, dtype=float)[:, U_X]
    if u_x.size < 2:
        raise ValueError("Displacement reconstruction requires at least two samples.")
    dx = float(length) / (u_x.size - 1)
    u = np.empty_like(u_x)
    u[0] = offset
    np.cumsum(0.5 * dx * (u_x[1:] + u_x[:-1]), out=u[1:])
    u[1:] += offset
    return u
