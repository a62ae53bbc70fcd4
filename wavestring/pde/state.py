"""
Sampled string state: per-point pairs of time and space derivatives.

A state array is a float array of shape ``(n, 2)``. Column ``U_T`` holds the
time derivative ``u_t`` and column ``U_X`` the space derivative ``u_x`` of
the displacement at each grid position.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np

U_T = 0
U_X = 1


class StatePoint(NamedTuple):
    """Time and space derivative of the displacement at one sample."""

    u_t: float
    u_x: float


def as_state_point(row: Sequence[float]) -> StatePoint:
    """Convert a length-2 row ``(u_t, u_x)`` into a `StatePoint`."""
    return StatePoint(float(row[U_T]), float(row[U_X]))


def empty_state(n: int) -> np.ndarray:
    """Return a zero-initialized state array with `n` samples."""
    return np.zeros((int(n), 2), dtype=float)
