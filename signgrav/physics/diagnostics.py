"""Run-level diagnostics: cycle detection and trajectory summaries."""

from typing import Any, Dict, Optional
import numpy as np
from signgrav.backends.base import Backend
from signgrav.errors import CycleNotFoundError
from signgrav.physics import energy
from signgrav.physics.simulator import Simulator
from signgrav.physics.trajectory import Trajectory
from signgrav.physics.validation import validate_steps

DEFAULT_MAX_CYCLE_STEPS = 1_000_000


def find_cycle_length(
    initial_positions: Any,
    max_steps: int = DEFAULT_MAX_CYCLE_STEPS,
    backend: Optional[Backend] = None
) -> int:
    """Count steps until the starting state (positions and zero velocities) recurs.
    
    Args:
        initial_positions: 1-D sequence of N >= 1 integer positions
        max_steps: Give up after this many steps
        backend: Compute backend (default: NumPy)
        
    Returns:
        Smallest t > 0 with state(t) == state(0)
        
    Raises:
        CycleNotFoundError: If no repeat occurs within max_steps
    """
    sim = Simulator(backend)
    start = sim.initial_state(initial_positions)
    limit = validate_steps(max_steps)
    
    to_numpy = sim.backend.to_numpy
    target_positions = to_numpy(start.positions)
    target_velocities = to_numpy(start.velocities)
    
    state = start
    for _ in range(limit):
        state = sim.step(state)
        if (np.array_equal(to_numpy(state.velocities), target_velocities)
                and np.array_equal(to_numpy(state.positions), target_positions)):
            return state.step
    
    raise CycleNotFoundError(f"Initial state did not repeat within {limit} steps")


def summarize(trajectory: Trajectory) -> Dict[str, Any]:
    """Scalar summary of a trajectory, suitable for printing or JSON."""
    return {
        "n_bodies": trajectory.n_bodies,
        "steps": trajectory.n_steps,
        "final_potential_energy": int(trajectory.potential_energies[-1]),
        "final_kinetic_energy": int(trajectory.kinetic_energies[-1]),
        "final_total_energy": int(trajectory.total_energies[-1]),
        "max_kinetic_energy": int(np.max(trajectory.kinetic_energies)),
        "final_center_position": float(energy.center_position(trajectory.positions[-1])),
    }
