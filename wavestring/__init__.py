"""wavestring - explicit characteristic integration of a vibrating string."""

__version__ = "0.1.0"

# pde is imported first: diagnostics reads the state layout from it.
from .pde import (
    MIN_FRAMERATE,
    MIN_TABULATION_SIZE,
    BoundaryCondition,
    DerivativeKind,
    StatePoint,
    StringConfig,
    StringSimulator,
    boundary_point,
    characteristic_update,
    integrate_displacement,
    step_dt,
    tabulate,
    tabulation_size,
)
from .diagnostics import (
    assert_finite_state,
    debug_context,
    is_debug_enabled,
    riemann_invariants,
    set_debug_enabled,
    string_energy,
)

__all__ = [
    # Version
    "__version__",
    # Solver
    "BoundaryCondition",
    "DerivativeKind",
    "StatePoint",
    "StringConfig",
    "StringSimulator",
    "MIN_FRAMERATE",
    "MIN_TABULATION_SIZE",
    "tabulation_size",
    "step_dt",
    "tabulate",
    "characteristic_update",
    "boundary_point",
    "integrate_displacement",
    # Diagnostics
    "riemann_invariants",
    "string_energy",
    "assert_finite_state",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
