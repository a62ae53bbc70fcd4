"""Diagnostics and debugging utilities for wavestring."""

from .core import assert_finite_state, riemann_invariants, string_energy
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "riemann_invariants",
    "string_energy",
    "assert_finite_state",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
