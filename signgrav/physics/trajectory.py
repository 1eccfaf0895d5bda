"""Trajectory container returned by the simulator."""

from typing import NamedTuple, Sequence
import numpy as np
from signgrav.backends.base import Backend
from signgrav.physics.state import BodyState
from signgrav.physics import energy


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class Trajectory(NamedTuple):
    """Per-step history of a run, rows indexed by step 0..steps.
    
    Unpacks as (positions, velocities, potential_energies, kinetic_energies).
    All arrays are read-only int64 NumPy arrays.
    
    Attributes:
        positions: (steps + 1, N) body positions
        velocities: (steps + 1, N) body velocities
        potential_energies: (steps + 1,) Σ|x| per step
        kinetic_energies: (steps + 1,) Σ|v| per step
    """
    positions: np.ndarray
    velocities: np.ndarray
    potential_energies: np.ndarray
    kinetic_energies: np.ndarray
    
    @classmethod
    def from_states(cls, states: Sequence[BodyState], backend: Backend) -> "Trajectory":
        """Stack snapshots (ordered by step) into a trajectory.
        
        Args:
            states: Snapshots for steps 0..steps
            backend: Backend the snapshot arrays live on
            
        Returns:
            Trajectory with energies derived from the stacked states
        """
        positions = np.stack([backend.to_numpy(s.positions) for s in states]).astype(np.int64)
        velocities = np.stack([backend.to_numpy(s.velocities) for s in states]).astype(np.int64)
        return cls(
            positions=_frozen(positions),
            velocities=_frozen(velocities),
            potential_energies=_frozen(energy.potential_energy(positions)),
            kinetic_energies=_frozen(energy.kinetic_energy(velocities)),
        )
    
    @property
    def n_bodies(self) -> int:
        return self.positions.shape[1]
    
    @property
    def n_steps(self) -> int:
        """Number of simulated steps (rows minus the initial state)."""
        return self.positions.shape[0] - 1
    
    @property
    def total_energies(self) -> np.ndarray:
        return energy.total_energy(self.positions, self.velocities)
    
    @property
    def momenta(self) -> np.ndarray:
        return energy.momentum(self.velocities)
    
    def state_at(self, step: int) -> BodyState:
        """Snapshot for one step, as NumPy arrays."""
        if not 0 <= step <= self.n_steps:
            raise IndexError(f"step {step} outside 0..{self.n_steps}")
        return BodyState(step, self.positions[step], self.velocities[step])
