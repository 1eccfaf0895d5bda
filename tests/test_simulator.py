"""Tests for the simulator step loop."""

import numpy as np
import pytest
from signgrav.backends.numpy_backend import NumPyBackend
from signgrav.physics.simulator import Simulator, simulate
from signgrav.physics.trajectory import Trajectory


def test_two_body_regression():
    """Bodies at -1 and 1 meet, pass, stop and turn around."""
    positions, velocities, pe, ke = simulate([-1, 1], 3)
    
    assert np.array_equal(positions, [[-1, 1], [0, 0], [1, -1], [1, -1]])
    assert np.array_equal(velocities, [[0, 0], [1, -1], [1, -1], [0, 0]])
    assert np.array_equal(pe, [2, 0, 2, 2])
    assert np.array_equal(ke, [0, 2, 2, 0])


def test_three_body_steps():
    """Hand-computed first two steps for three bodies."""
    trajectory = simulate([0, 2, 5], 2)
    
    assert np.array_equal(trajectory.positions, [[0, 2, 5], [2, 2, 3], [5, 3, -1]])
    assert np.array_equal(trajectory.velocities, [[0, 0, 0], [2, 0, -2], [3, 1, -4]])
    assert np.array_equal(trajectory.potential_energies, [7, 7, 9])
    assert np.array_equal(trajectory.kinetic_energies, [0, 4, 8])


def test_zero_steps():
    """Zero steps returns only the initial state."""
    initial = [3, -4, 0, 7]
    positions, velocities, pe, ke = simulate(initial, 0)
    
    assert positions.shape == (1, 4)
    assert np.array_equal(positions[0], initial)
    assert np.array_equal(velocities[0], [0, 0, 0, 0])
    assert pe[0] == 14
    assert ke[0] == 0


def test_single_body_stays_put():
    """A lone body feels no pull."""
    trajectory = simulate([-6], 25)
    
    assert np.all(trajectory.positions == -6)
    assert np.all(trajectory.velocities == 0)
    assert np.all(trajectory.potential_energies == 6)
    assert np.all(trajectory.kinetic_energies == 0)


@pytest.mark.parametrize("n_bodies,steps", [(1, 0), (2, 1), (5, 17), (9, 40)])
def test_trajectory_shape(n_bodies, steps):
    """Every per-step array has steps + 1 rows and N columns."""
    rng = np.random.default_rng(n_bodies)
    initial = rng.integers(-20, 20, size=n_bodies)
    trajectory = simulate(initial, steps)
    
    assert trajectory.positions.shape == (steps + 1, n_bodies)
    assert trajectory.velocities.shape == (steps + 1, n_bodies)
    assert trajectory.potential_energies.shape == (steps + 1,)
    assert trajectory.kinetic_energies.shape == (steps + 1,)
    assert trajectory.n_bodies == n_bodies
    assert trajectory.n_steps == steps


def test_momentum_is_zero():
    """Pairwise pulls cancel, so velocities always sum to zero."""
    trajectory = simulate([4, -9, 13, 0, 2, 2], 60)
    
    assert np.all(trajectory.momenta == 0)


def test_update_rule_holds_every_step():
    """v(t) = v(t-1) + Σ sign(x_j - x_i), x(t) = x(t-1) + v(t)."""
    trajectory = simulate([5, -3, 8, 1], 30)
    
    for t in range(1, trajectory.n_steps + 1):
        prev = trajectory.positions[t - 1]
        delta = np.sign(prev[None, :] - prev[:, None]).sum(axis=1)
        assert np.array_equal(trajectory.velocities[t], trajectory.velocities[t - 1] + delta)
        assert np.array_equal(trajectory.positions[t], prev + trajectory.velocities[t])


def test_float_positions_are_accepted():
    """Integer-valued floats behave like ints."""
    from_floats = simulate(np.array([-1.0, 1.0]), 3)
    from_ints = simulate([-1, 1], 3)
    
    assert from_floats.positions.dtype == np.int64
    assert np.array_equal(from_floats.positions, from_ints.positions)


def test_input_is_not_modified():
    """The caller's array is copied, never written."""
    initial = np.array([-2, 2])
    simulate(initial, 5)
    
    assert np.array_equal(initial, [-2, 2])


def test_trajectory_is_read_only():
    """Returned arrays cannot be written to."""
    trajectory = simulate([-1, 1], 2)
    
    with pytest.raises(ValueError):
        trajectory.positions[0, 0] = 10
    with pytest.raises(ValueError):
        trajectory.kinetic_energies[0] = 10


def test_total_energy():
    """Total energy sums |x_i|·|v_i| per body."""
    trajectory = simulate([-1, 1], 3)
    
    assert np.array_equal(trajectory.total_energies, [0, 0, 2, 0])


def test_state_at():
    """state_at returns one row of the trajectory."""
    trajectory = simulate([-1, 1], 3)
    state = trajectory.state_at(2)
    
    assert state.step == 2
    assert np.array_equal(state.positions, [1, -1])
    assert np.array_equal(state.velocities, [1, -1])
    with pytest.raises(IndexError):
        trajectory.state_at(4)


def test_simulator_step_returns_new_state():
    """step() leaves the previous snapshot untouched."""
    sim = Simulator(NumPyBackend())
    start = sim.initial_state([-1, 1])
    after = sim.step(start)
    
    assert after.step == 1
    assert start.step == 0
    assert np.array_equal(start.positions, [-1, 1])
    assert np.array_equal(after.positions, [0, 0])
    assert np.array_equal(after.velocities, [1, -1])


def test_run_returns_trajectory():
    """Simulator.run and simulate agree."""
    trajectory = Simulator().run([3, 1, 4, 1, 5], 12)
    
    assert isinstance(trajectory, Trajectory)
    assert np.array_equal(trajectory.positions, simulate([3, 1, 4, 1, 5], 12).positions)


def test_debug_output(capsys):
    """Debug mode prints a line every debug_interval steps."""
    sim = Simulator(debug=True, debug_interval=2)
    sim.run([-1, 1], 4)
    
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "[numpy] step 2: PE=2, KE=2",
        "[numpy] step 4: PE=0, KE=2",
    ]
