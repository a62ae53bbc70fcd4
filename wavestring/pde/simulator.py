"""
Explicit time stepping of a vibrating string along its characteristics.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

import numpy as np

from ..diagnostics import assert_finite_state, is_debug_enabled
from ..logging import get_logger
from .boundary import BoundaryCondition, DerivativeKind, RealFunction
from .characteristics import boundary_point, characteristic_update
from .state import U_T, U_X, StatePoint, as_state_point
from .utils import (
    MIN_FRAMERATE,
    MIN_TABULATION_SIZE,
    compute_cfl,
    linspace_grid,
    step_dt,
    tabulate,
    tabulation_size,
    validate_string_parameters,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class StringConfig:
    """
    Physical and discretization parameters of the string.

    Args:
        wave_speed: Wave speed ``a``. Must be finite and positive.
        length: String length ``L``. Must be finite and positive.
        min_framerate: Minimum number of steps per simulated second.
        min_tabulation_size: Lower bound on the number of samples.
    """

    wave_speed: float
    length: float
    min_framerate: float = MIN_FRAMERATE
    min_tabulation_size: int = MIN_TABULATION_SIZE

    def __post_init__(self) -> None:
        """Validate StringConfig invariants."""
        validate_string_parameters(self.wave_speed, self.length)
        if not math.isfinite(self.min_framerate) or self.min_framerate <= 0.0:
            raise ValueError(
                f"min_framerate must be finite and positive, got {self.min_framerate!r}."
            )
        if self.min_tabulation_size < 3:
            raise ValueError(
                f"min_tabulation_size must be >= 3, got {self.min_tabulation_size}."
            )

    @property
    def num_points(self) -> int:
        return tabulation_size(
            self.wave_speed, self.length, self.min_framerate, self.min_tabulation_size
        )

    @property
    def dx(self) -> float:
        return self.length / (self.num_points - 1)

    @property
    def dt(self) -> float:
        return step_dt(self.wave_speed, self.length, self.num_points)

    @property
    def cfl(self) -> float:
        """Courant number of the clock step, ``a dt / dx``."""
        return compute_cfl(self.dx, self.dt, self.wave_speed)


class StringSimulator:
    """
    Characteristic-based explicit solver for a string with driven ends.

    The state is the pair ``(u_t, u_x)`` sampled on a fixed uniform grid.
    Two buffers of equal length are kept; each step writes the buffer that
    is not active and then flips the active index.

    Parameters
    ----------
    left / right:
        Boundary conditions at ``x = 0`` and ``x = L``.
    initial_u_x / initial_u_t:
        Initial space and time derivatives as functions of position.
    wave_speed, length:
        String parameters, both finite and positive.
    min_framerate, min_tabulation_size:
        Discretization bounds, see `StringConfig`.
    """

    def __init__(
        self,
        left: BoundaryCondition,
        right: BoundaryCondition,
        initial_u_x: RealFunction,
        initial_u_t: RealFunction,
        wave_speed: float,
        length: float,
        min_framerate: float = MIN_FRAMERATE,
        min_tabulation_size: int = MIN_TABULATION_SIZE,
    ) -> None:
        if left is None or right is None:
            raise ValueError("Both left and right boundary conditions must be provided.")
        if not isinstance(left, BoundaryCondition) or not isinstance(right, BoundaryCondition):
            raise TypeError("left and right must be BoundaryCondition instances.")

        config = StringConfig(
            wave_speed=float(wave_speed),
            length=float(length),
            min_framerate=float(min_framerate),
            min_tabulation_size=int(min_tabulation_size),
        )
        state, scratch = tabulate(
            initial_u_x,
            initial_u_t,
            config.wave_speed,
            config.length,
            config.min_framerate,
            config.min_tabulation_size,
        )

        self._left = left
        self._right = right
        self._config = config
        self._buffers = [state, scratch]
        self._active = 0
        self._cur_t = 0.0
        self._rem_t = 0.0
        self._steps_taken = 0

        logger.info(
            "Tabulated %d samples (a=%g, L=%g, dt=%g).",
            self.num_points,
            config.wave_speed,
            config.length,
            self.dt,
        )
        logger.debug("Courant number of the clock step: %g.", config.cfl)

    # ------------------------------------------------------------------
    @property
    def config(self) -> StringConfig:
        return self._config

    @property
    def wave_speed(self) -> float:
        return self._config.wave_speed

    @property
    def length(self) -> float:
        return self._config.length

    @property
    def num_points(self) -> int:
        return self._buffers[self._active].shape[0]

    @property
    def dx(self) -> float:
        return self.length / (self.num_points - 1)

    @property
    def dt(self) -> float:
        """Clock increment of one step."""
        return step_dt(self.wave_speed, self.length, self.num_points)

    @property
    def grid(self) -> np.ndarray:
        return linspace_grid(0.0, self.length, self.num_points)

    @property
    def cur_t(self) -> float:
        """Accumulated simulated time."""
        return self._cur_t

    @property
    def rem_t(self) -> float:
        """Fraction of the last `advance` interval shorter than one step."""
        return self._rem_t

    @property
    def steps_taken(self) -> int:
        return self._steps_taken

    @property
    def state(self) -> np.ndarray:
        """Read-only view of the current state, shape (n, 2)."""
        view = self._buffers[self._active].view()
        view.flags.writeable = False
        return view

    @property
    def u_t(self) -> np.ndarray:
        return self.state[:, U_T]

    @property
    def u_x(self) -> np.ndarray:
        return self.state[:, U_X]

    def point(self, index: int) -> StatePoint:
        """Return the current sample at `index`."""
        return as_state_point(self._buffers[self._active][index])

    # ------------------------------------------------------------------
    @property
    def boundary_left(self) -> BoundaryCondition:
        return self._left

    @boundary_left.setter
    def boundary_left(self, condition: BoundaryCondition) -> None:
        if not isinstance(condition, BoundaryCondition):
            raise TypeError("boundary_left must be a BoundaryCondition.")
        self._left = condition

    @property
    def boundary_right(self) -> BoundaryCondition:
        return self._right

    @boundary_right.setter
    def boundary_right(self, condition: BoundaryCondition) -> None:
        if not isinstance(condition, BoundaryCondition):
            raise TypeError("boundary_right must be a BoundaryCondition.")
        self._right = condition

    def set_left_kind(self, kind: DerivativeKind) -> None:
        """Switch which derivative is prescribed at the left end."""
        self._left = dataclasses.replace(self._left, kind=kind)

    def set_right_kind(self, kind: DerivativeKind) -> None:
        """Switch which derivative is prescribed at the right end."""
        self._right = dataclasses.replace(self._right, kind=kind)

    def set_left_function(self, fun: RealFunction) -> None:
        """Replace the time profile prescribed at the left end."""
        self._left = dataclasses.replace(self._left, fun=fun)

    def set_right_function(self, fun: RealFunction) -> None:
        """Replace the time profile prescribed at the right end."""
        self._right = dataclasses.replace(self._right, fun=fun)

    # ------------------------------------------------------------------
    def reset(
        self,
        initial_u_x: RealFunction,
        initial_u_t: RealFunction,
        wave_speed: float,
        length: float,
        reset_clock: bool = False,
    ) -> None:
        """
        Re-tabulate the string from new initial conditions and parameters.

        The simulator is left unchanged if validation or tabulation fails.
        The clock keeps running unless `reset_clock` is set.
        """
        config = dataclasses.replace(
            self._config, wave_speed=float(wave_speed), length=float(length)
        )
        state, scratch = tabulate(
            initial_u_x,
            initial_u_t,
            config.wave_speed,
            config.length,
            config.min_framerate,
            config.min_tabulation_size,
        )

        self._config = config
        self._buffers = [state, scratch]
        self._active = 0
        if reset_clock:
            self._cur_t = 0.0
            self._rem_t = 0.0
            self._steps_taken = 0

        logger.info(
            "Reset to %d samples (a=%g, L=%g, dt=%g).",
            self.num_points,
            config.wave_speed,
            config.length,
            self.dt,
        )

    def step(self) -> None:
        """Advance the state by one step of length `dt`."""
        current = self._buffers[self._active]
        target = self._buffers[1 - self._active]
        n = current.shape[0]
        if target.shape != current.shape:
            raise RuntimeError(
                f"State buffers out of sync: {current.shape} vs {target.shape}."
            )

        a = self.wave_speed
        t_next = self._cur_t + self.dt

        target[0] = boundary_point(self._left, t_next, as_state_point(current[1]), a, "left")
        characteristic_update(current[:-2], current[2:], a, out=target[1:-1])
        target[n - 1] = boundary_point(
            self._right, t_next, as_state_point(current[n - 2]), a, "right"
        )

        if is_debug_enabled():
            assert_finite_state(target)

        self._cur_t = t_next
        self._active = 1 - self._active
        self._steps_taken += 1

    def steps(self, count: int) -> int:
        """Perform `count` steps and return how many were performed."""
        count = int(count)
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}.")
        done = 0
        for _ in range(count):
            self.step()
            done += 1
        return done

    def advance(self, dt: float) -> int:
        """
        Advance by as many whole steps as fit into the elapsed time `dt`.

        The leftover ``dt mod step`` is stored in `rem_t` and not carried
        into later calls. Returns the number of steps performed; raises
        `RuntimeError` if the committed step count differs from the request.
        """
        dt = float(dt)
        if not math.isfinite(dt) or dt < 0.0:
            raise ValueError(f"dt must be finite and non-negative, got {dt!r}.")

        step = self.dt
        self._rem_t = math.fmod(dt, step)
        count = int(dt / step)

        start = self._steps_taken
        self.steps(count)
        done = self._steps_taken - start
        if done != count:
            raise RuntimeError(f"Advance performed {done} of {count} steps.")

        logger.debug("Advanced %d steps to t=%g (rem_t=%g).", done, self._cur_t, self._rem_t)
        return done

    def run(self, num_steps: int) -> np.ndarray:
        """
        Step `num_steps` times and return the history of states.

        Returns an array of shape (num_steps + 1, n, 2) whose first entry is
        the state before stepping.
        """
        num_steps = int(num_steps)
        if num_steps < 0:
            raise ValueError(f"num_steps must be non-negative, got {num_steps}.")

        out = np.zeros((num_steps + 1, self.num_points, 2), dtype=float)
        out[0] = self._buffers[self._active]
        for k in range(1, num_steps + 1):
            self.step()
            out[k] = self._buffers[self._active]
        return out
