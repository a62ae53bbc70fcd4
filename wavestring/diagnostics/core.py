"""Diagnostic functions for sampled string states."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..pde.state import U_T, U_X


def _as_state(state: np.ndarray) -> np.ndarray:
    arr = np.asarray(state, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"state must have shape (n, 2), got {arr.shape}.")
    return arr


def riemann_invariants(state: np.ndarray, wave_speed: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return the Riemann invariants of a state array.

    Parameters
    ----------
    state:
        Array of shape (n, 2) holding ``(u_t, u_x)`` per sample.
    wave_speed:
        Wave speed ``a``.

    Returns
    -------
    (R, S):
        ``R = u_t - a u_x`` is carried by right-moving characteristics and
        ``S = u_t + a u_x`` by left-moving ones.
    """
    arr = _as_state(state)
    u_t = arr[:, U_T]
    u_x = arr[:, U_X]
    return u_t - wave_speed * u_x, u_t + wave_speed * u_x


def string_energy(state: np.ndarray, wave_speed: float, length: float) -> float:
    """
    Return the energy ``∫ (u_t² + a² u_x²) / 2 dx`` over the string.

    The integral uses the trapezoid rule on the uniform sample grid.
    """
    arr = _as_state(state)
    if arr.shape[0] < 2:
        raise ValueError("string_energy requires at least two samples.")
    density = 0.5 * (arr[:, U_T] ** 2 + (wave_speed * arr[:, U_X]) ** 2)
    dx = float(length) / (arr.shape[0] - 1)
    return float(dx * (density.sum() - 0.5 * (density[0] + density[-1])))


def assert_finite_state(state: np.ndarray) -> None:
    """
    Assert that a state array has shape (n, 2) and only finite entries.

    Raises
    ------
    ValueError
        If the shape is wrong or any entry is NaN or infinite.
    """
    arr = _as_state(state)
    finite = np.isfinite(arr)
    if not finite.all():
        bad = np.flatnonzero(~finite.all(axis=1))
        raise ValueError(
            f"State contains non-finite values at indices {bad[:10].tolist()}."
        )
