"""Benchmark string time stepping."""

import math
import time
from typing import Dict

from wavestring import BoundaryCondition, StringSimulator


def benchmark_stepping(length: float, wave_speed: float = 1.0, n_steps: int = 2000) -> Dict[str, float]:
    """Benchmark repeated steps on a plucked string.

    Args:
        length: String length; together with the wave speed it sets the grid size.
        wave_speed: Wave speed.
        n_steps: Number of steps to time.

    Returns:
        Dictionary with timing results.
    """
    fixed = BoundaryCondition.time_derivative(lambda t: 0.0)
    sim = StringSimulator(
        fixed,
        fixed,
        lambda x: math.sin(math.pi * x / length),
        lambda x: 0.0,
        wave_speed,
        length,
    )

    # Warmup
    sim.steps(10)

    start = time.perf_counter()
    sim.steps(n_steps)
    end = time.perf_counter()

    total_time = end - start
    return {
        "num_points": sim.num_points,
        "n_steps": n_steps,
        "total_time_sec": total_time,
        "time_per_step_sec": total_time / n_steps,
        "points_per_sec": sim.num_points * n_steps / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking stepping...")

    for length in (1.0, 10.0, 100.0):
        results = benchmark_stepping(length)
        print(f"L={length:g} ({results['num_points']} points):")
        print(f"  Time per step: {results['time_per_step_sec']*1e6:.2f} μs")
        print(f"  Points per second: {results['points_per_sec']:.0f}")
