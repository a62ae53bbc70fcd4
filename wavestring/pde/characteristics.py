"""
Characteristic updates for the 1D wave equation in first-order form.

With ``R = u_t - a u_x`` constant along ``dx/dt = +a`` and
``S = u_t + a u_x`` constant along ``dx/dt = -a``, a new sample takes ``R``
from its left neighbour and ``S`` from its right neighbour. At an end only
one neighbour exists, and the prescribed derivative closes the system.
"""

from __future__ import annotations

from typing import Literal, Optional

import numpy as np

from .boundary import BoundaryCondition
from .state import U_T, U_X, StatePoint

Side = Literal["left", "right"]


def characteristic_update(
    left: np.ndarray,
    right: np.ndarray,
    wave_speed: float,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Combine left- and right-neighbour samples into the new sample between them.

    Parameters
    ----------
    left / right:
        Arrays of shape (..., 2) holding ``(u_t, u_x)`` of the old left and
        right neighbours. A single `StatePoint` is accepted as well.
    wave_speed:
        Wave speed ``a``.
    out:
        Optional destination of the broadcast shape. It must not share
        memory with `left` or `right`.

    Returns
    -------
    np.ndarray
        New samples of shape (..., 2).
    """
    left = np.asarray(left, dtype=float)
    right = np.asarray(right, dtype=float)
    a = float(wave_speed)

    if out is None:
        out = np.empty(np.broadcast_shapes(left.shape, right.shape), dtype=float)
    elif np.may_share_memory(out, left) or np.may_share_memory(out, right):
        raise ValueError("out must not alias the input samples.")

    l_t, l_x = left[..., U_T], left[..., U_X]
    r_t, r_x = right[..., U_T], right[..., U_X]

    out[..., U_X] = (l_x - l_t / a + r_x + r_t / a) / 2.0
    out[..., U_T] = (l_t - l_x * a + r_t + r_x * a) / 2.0
    return out


def boundary_point(
    condition: BoundaryCondition,
    t: float,
    neighbor: StatePoint,
    wave_speed: float,
    side: Side,
) -> StatePoint:
    """
    Evaluate the new end sample at time `t`.

    The prescribed derivative is taken from `condition`; the other one
    follows from the invariant carried outwards from `neighbor`, the old
    sample next to the end (``S`` at the left end, ``R`` at the right end).
    """
    if side == "left":
        sign = -1.0
    elif side == "right":
        sign = 1.0
    else:
        raise ValueError(f"side must be 'left' or 'right', got {side!r}.")

    a = float(wave_speed)
    p_t, p_x = float(neighbor[U_T]), float(neighbor[U_X])
    prescribed = condition.value(t)

    if condition.kind == "u_t":
        u_t = prescribed
        return StatePoint(u_t=u_t, u_x=p_x + sign * (u_t - p_t) / a)

    u_x = prescribed
    return StatePoint(u_t=p_t + sign * (u_x - p_x) * a, u_x=u_x)
