"""
Boundary-condition abstractions for the string ends.

Each `BoundaryCondition` stores which derivative of the displacement is
prescribed at an end (``"u_t"`` or ``"u_x"``) and a callable ``fun(t)``
returning the prescribed value at simulated time ``t``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

DerivativeKind = Literal["u_t", "u_x"]
RealFunction = Callable[[float], float]

DERIVATIVE_KINDS = ("u_t", "u_x")


@dataclass(frozen=True)
class BoundaryCondition:
    """Container describing the prescribed derivative and its time profile."""

    kind: DerivativeKind
    fun: RealFunction

    def __post_init__(self) -> None:
        if self.kind not in DERIVATIVE_KINDS:
            raise ValueError(
                f"Boundary kind must be one of {DERIVATIVE_KINDS}, got {self.kind!r}."
            )
        if not callable(self.fun):
            raise TypeError("Boundary function must be callable.")

    @classmethod
    def time_derivative(cls, fun: RealFunction) -> "BoundaryCondition":
        """Prescribe ``u_t(t)`` at the end."""
        return cls("u_t", fun)

    @classmethod
    def space_derivative(cls, fun: RealFunction) -> "BoundaryCondition":
        """Prescribe ``u_x(t)`` at the end."""
        return cls("u_x", fun)

    def value(self, t: float) -> float:
        """Return the prescribed derivative at time `t`."""
        return float(self.fun(t))
