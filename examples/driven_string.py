"""
Example: string driven at one end, free at the other.

The left end is shaken with u_t(t) = sin(4 t); the right end is free
(u_x = 0). Halfway through, the left end is switched to a prescribed slope.
Pass --plot to show a live animation (requires matplotlib).
"""

import math
import sys

from wavestring import BoundaryCondition, StringSimulator
from wavestring.logging import configure_logging


def main(plot=False):
    configure_logging(level="INFO")

    sim = StringSimulator(
        left=BoundaryCondition.time_derivative(lambda t: math.sin(4.0 * t)),
        right=BoundaryCondition.space_derivative(lambda t: 0.0),
        initial_u_x=lambda x: 0.0,
        initial_u_t=lambda x: 0.0,
        wave_speed=0.8,
        length=2.0,
    )

    if plot:
        from matplotlib import pyplot as plt

        from wavestring.viz import StringAnimator

        animator = StringAnimator(sim)
        anim = animator.animate()  # noqa: F841
        plt.show()
        return

    sim.advance(1.5)
    print(f"Left end u_t after 1.5 s: {sim.point(0).u_t:+.4f}")

    sim.set_left_kind("u_x")
    sim.set_left_function(lambda t: 0.1 * math.cos(t))
    sim.advance(1.5)
    print(f"Left end u_x after switch: {sim.point(0).u_x:+.4f}")
    print(f"Final time: {sim.cur_t:.4f} ({sim.steps_taken} steps, rem {sim.rem_t:.4f})")


if __name__ == "__main__":
    main(plot="--plot" in sys.argv[1:])
