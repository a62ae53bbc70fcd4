"""
Explicit characteristic solver for the 1D wave equation on a finite string.

The state is the pair ``(u_t, u_x)`` of time and space derivatives of the
displacement, sampled on a fixed uniform grid. Each step takes the
right-moving invariant ``u_t - a u_x`` from the left neighbour and the
left-moving invariant ``u_t + a u_x`` from the right neighbour. Each end
prescribes either ``u_t`` or ``u_x`` as a function of time.

The module provides:

* `StringSimulator` – double-buffered time stepping with an elapsed-time
  driven `advance`.
* `BoundaryCondition` – time-dependent ``u_t`` or ``u_x`` data per end.
* Grid helpers: tabulation sizing, step size, sampling of initial data.

Limitations: the grid is uniform and fixed once tabulated, the scheme is
explicit with a fixed step, and computations run on CPU with NumPy only.

Example
-------
>>> import math
>>> from wavestring.pde import BoundaryCondition, StringSimulator
>>>
>>> fixed = BoundaryCondition.time_derivative(lambda t: 0.0)
>>> sim = StringSimulator(
...     left=fixed,
...     right=fixed,
...     initial_u_x=math.sin,
...     initial_u_t=lambda x: 0.0,
...     wave_speed=1.0,
...     length=math.pi,
... )
>>> sim.num_points
378
>>> sim.advance(0.1)
6
"""

from .boundary import BoundaryCondition, DerivativeKind, RealFunction
from .characteristics import boundary_point, characteristic_update
from .simulator import StringConfig, StringSimulator
from .state import U_T, U_X, StatePoint, as_state_point, empty_state
from .utils import (
    MIN_FRAMERATE,
    MIN_TABULATION_SIZE,
    compute_cfl,
    integrate_displacement,
    linspace_grid,
    step_dt,
    tabulate,
    tabulation_size,
    validate_string_parameters,
)

__all__ = [
    "BoundaryCondition",
    "DerivativeKind",
    "RealFunction",
    "StatePoint",
    "U_T",
    "U_X",
    "as_state_point",
    "empty_state",
    "characteristic_update",
    "boundary_point",
    "StringConfig",
    "StringSimulator",
    "MIN_FRAMERATE",
    "MIN_TABULATION_SIZE",
    "compute_cfl",
    "integrate_displacement",
    "linspace_grid",
    "step_dt",
    "tabulate",
    "tabulation_size",
    "validate_string_parameters",
]
