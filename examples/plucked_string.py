"""
Example: plucked string with fixed ends.

Starts from u_x(x, 0) = sin(x), u_t(x, 0) = 0 on a string of length pi with
unit wave speed and holds both ends still (u_t = 0). The sampled derivatives
are compared with the d'Alembert solution after a number of animation
frames.
"""

import math

import numpy as np

from wavestring import BoundaryCondition, StringSimulator, string_energy


def dalembert(x, tau):
    """Return (u_t, u_x) of the exact solution at propagation time tau."""
    r = -np.abs(np.sin(x - tau))
    s = np.abs(np.sin(x + tau))
    return 0.5 * (r + s), 0.5 * (s - r)


def main():
    fixed = BoundaryCondition.time_derivative(lambda t: 0.0)
    sim = StringSimulator(
        left=fixed,
        right=fixed,
        initial_u_x=math.sin,
        initial_u_t=lambda x: 0.0,
        wave_speed=1.0,
        length=math.pi,
    )
    print(f"Samples: {sim.num_points}, step: {sim.dt:.6f}")

    energy0 = string_energy(sim.state, sim.wave_speed, sim.length)
    frame = 1.0 / 30.0
    for _ in range(90):
        sim.advance(frame)

    u_t, u_x = dalembert(sim.grid, sim.steps_taken * sim.dx / sim.wave_speed)
    deviation = max(np.max(np.abs(sim.u_t - u_t)), np.max(np.abs(sim.u_x - u_x)))
    energy = string_energy(sim.state, sim.wave_speed, sim.length)

    print(f"Steps: {sim.steps_taken}, clock: {sim.cur_t:.4f}")
    print(f"Max deviation from d'Alembert: {deviation:.3e}")
    print(f"Relative energy drift: {abs(energy - energy0) / energy0:.3e}")


if __name__ == "__main__":
    main()
