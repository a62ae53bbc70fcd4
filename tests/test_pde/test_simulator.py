from __future__ import annotations

import math

import numpy as np
import pytest

from wavestring.pde.boundary import BoundaryCondition
from wavestring.pde.simulator import StringConfig, StringSimulator
from wavestring.pde.utils import tabulation_size


def _fixed() -> BoundaryCondition:
    return BoundaryCondition.time_derivative(lambda t: 0.0)


def _simulator(wave_speed: float = 1.0, length: float = 1.0) -> StringSimulator:
    return StringSimulator(
        left=_fixed(),
        right=_fixed(),
        initial_u_x=lambda x: math.sin(math.pi * x / length),
        initial_u_t=lambda x: 0.0,
        wave_speed=wave_speed,
        length=length,
    )


def test_string_config_validates_and_derives_grid() -> None:
    config = StringConfig(wave_speed=0.5, length=4.0)
    assert config.num_points == 961
    assert config.dx == pytest.approx(4.0 / 960)
    assert config.dt == pytest.approx(2.0 * 4.0 / (0.5 * 960))

    with pytest.raises(ValueError):
        StringConfig(wave_speed=0.0, length=1.0)
    with pytest.raises(ValueError):
        StringConfig(wave_speed=1.0, length=1.0, min_framerate=0.0)
    with pytest.raises(ValueError):
        StringConfig(wave_speed=1.0, length=1.0, min_tabulation_size=2)


def test_string_config_courant_number_of_clock_step() -> None:
    assert StringConfig(wave_speed=1.0, length=1.0).cfl == pytest.approx(2.0)
    assert StringConfig(wave_speed=0.5, length=4.0).cfl == pytest.approx(2.0)


def test_simulator_exposes_grid_and_parameters() -> None:
    sim = _simulator(wave_speed=2.0, length=3.0)
    n = tabulation_size(2.0, 3.0)
    assert sim.num_points == n
    assert sim.state.shape == (n, 2)
    assert sim.grid[0] == 0.0
    assert sim.grid[-1] == pytest.approx(3.0)
    assert sim.dx == pytest.approx(3.0 / (n - 1))
    assert sim.dt == pytest.approx(2.0 * 3.0 / (2.0 * (n - 1)))
    assert sim.cur_t == 0.0
    assert sim.rem_t == 0.0
    np.testing.assert_allclose(sim.u_x, np.sin(np.pi * sim.grid / 3.0), atol=1e-12)
    np.testing.assert_array_equal(sim.u_t, 0.0)


def test_simulator_custom_resolution() -> None:
    sim = StringSimulator(
        _fixed(), _fixed(), lambda x: 0.0, lambda x: 0.0, 1.0, 1.0,
        min_framerate=30.0, min_tabulation_size=11,
    )
    assert sim.num_points == 61


@pytest.mark.parametrize("wave_speed, length", [(0.0, 1.0), (1.0, -1.0), (math.inf, 1.0)])
def test_simulator_rejects_invalid_parameters(wave_speed: float, length: float) -> None:
    with pytest.raises(ValueError):
        _simulator(wave_speed=wave_speed, length=length)


def test_simulator_requires_both_boundaries() -> None:
    with pytest.raises(ValueError):
        StringSimulator(None, _fixed(), lambda x: 0.0, lambda x: 0.0, 1.0, 1.0)


def test_simulator_rejects_bare_callables_as_boundaries() -> None:
    with pytest.raises(TypeError):
        StringSimulator(lambda t: 0.0, _fixed(), lambda x: 0.0, lambda x: 0.0, 1.0, 1.0)
    with pytest.raises(TypeError):
        StringSimulator(_fixed(), "u_t", lambda x: 0.0, lambda x: 0.0, 1.0, 1.0)


def test_state_view_is_read_only() -> None:
    sim = _simulator()
    with pytest.raises(ValueError):
        sim.state[0, 0] = 1.0
    with pytest.raises(ValueError):
        sim.u_t[3] = 1.0


def test_step_preserves_length_and_advances_clock_by_dt() -> None:
    sim = _simulator(wave_speed=0.7, length=2.5)
    n = sim.num_points
    dt = 2.0 * 2.5 / (0.7 * (n - 1))

    sim.step()
    assert sim.state.shape == (n, 2)
    assert sim.cur_t == dt

    for k in range(2, 40):
        t_before = sim.cur_t
        sim.step()
        assert sim.state.shape == (n, 2)
        assert sim.cur_t - t_before == pytest.approx(dt)
    assert sim.steps_taken == 39
    assert sim.cur_t == pytest.approx(39 * dt)


def test_step_swaps_buffers_without_aliasing() -> None:
    sim = _simulator()
    first = sim.state
    sim.step()
    second = sim.state
    assert not np.shares_memory(first, second)
    sim.step()
    assert np.shares_memory(sim.state, first)


def test_step_detects_buffer_mismatch() -> None:
    sim = _simulator()
    sim._buffers[1] = np.zeros((5, 2))
    with pytest.raises(RuntimeError, match="out of sync"):
        sim.step()


def test_advance_performs_whole_steps_and_records_remainder() -> None:
    sim = _simulator()
    dt = sim.dt

    performed = sim.advance(3.0 * dt + 0.4 * dt)

    assert performed == 3
    assert sim.steps_taken == 3
    assert sim.cur_t == pytest.approx(3.0 * dt)
    assert sim.rem_t == pytest.approx(0.4 * dt)


def test_advance_shorter_than_a_step_does_nothing() -> None:
    sim = _simulator()
    before = sim.state.copy()

    assert sim.advance(0.0) == 0
    assert sim.advance(0.99 * sim.dt) == 0

    np.testing.assert_array_equal(sim.state, before)
    assert sim.cur_t == 0.0
    assert sim.rem_t == pytest.approx(0.99 * sim.dt)


def test_advance_raises_when_steps_are_not_committed(monkeypatch) -> None:
    sim = _simulator()
    monkeypatch.setattr(sim, "step", lambda: None)
    with pytest.raises(RuntimeError, match="0 of 2"):
        sim.advance(2.5 * sim.dt)


def test_advance_does_not_accumulate_remainders() -> None:
    sim = _simulator()
    for _ in range(5):
        assert sim.advance(0.6 * sim.dt) == 0
    assert sim.steps_taken == 0


@pytest.mark.parametrize("dt", [-1e-3, math.nan, math.inf])
def test_advance_rejects_invalid_durations(dt: float) -> None:
    sim = _simulator()
    with pytest.raises(ValueError):
        sim.advance(dt)


def test_steps_rejects_negative_count() -> None:
    sim = _simulator()
    assert sim.steps(4) == 4
    with pytest.raises(ValueError):
        sim.steps(-1)


def test_run_returns_history() -> None:
    sim = _simulator()
    initial = sim.state.copy()
    history = sim.run(6)

    assert history.shape == (7, sim.num_points, 2)
    np.testing.assert_array_equal(history[0], initial)
    np.testing.assert_array_equal(history[-1], sim.state)
    assert sim.steps_taken == 6


def test_reset_regenerates_grid_and_keeps_clock() -> None:
    sim = _simulator()
    sim.steps(5)
    t_before = sim.cur_t

    sim.reset(lambda x: 1.0, lambda x: -1.0, wave_speed=0.5, length=4.0)

    assert sim.num_points == 961
    assert sim.wave_speed == 0.5
    assert sim.length == 4.0
    np.testing.assert_array_equal(sim.u_x, 1.0)
    np.testing.assert_array_equal(sim.u_t, -1.0)
    assert sim.cur_t == t_before

    sim.step()
    assert sim.state.shape == (961, 2)
    assert sim.cur_t == pytest.approx(t_before + sim.dt)


def test_reset_can_restart_clock() -> None:
    sim = _simulator()
    sim.advance(10.5 * sim.dt)
    sim.reset(lambda x: 0.0, lambda x: 0.0, wave_speed=1.0, length=1.0, reset_clock=True)
    assert sim.cur_t == 0.0
    assert sim.rem_t == 0.0
    assert sim.steps_taken == 0


def test_failed_reset_leaves_simulator_unchanged() -> None:
    sim = _simulator()
    sim.steps(3)
    before = sim.state.copy()
    config = sim.config

    with pytest.raises(ValueError):
        sim.reset(lambda x: 0.0, lambda x: 0.0, wave_speed=-2.0, length=1.0)

    def broken(x):
        if x > 0.5:
            raise KeyError("missing sample")
        return 0.0

    with pytest.raises(KeyError):
        sim.reset(broken, lambda x: 0.0, wave_speed=1.0, length=3.0)

    assert sim.config is config
    np.testing.assert_array_equal(sim.state, before)
    sim.step()
