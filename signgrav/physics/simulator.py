"""Main simulator controller."""

from typing import Optional, Any
from signgrav.backends.base import Backend
from signgrav.backends.factory import get_backend
from signgrav.physics.interaction import compute_velocity_deltas
from signgrav.physics.state import BodyState
from signgrav.physics.trajectory import Trajectory
from signgrav.physics.validation import validate_initial_positions, validate_steps


class Simulator:
    """Step loop for one-dimensional sign-gravity bodies.
    
    Each step reads only the previous snapshot: velocities change by the
    summed pairwise signs, then positions advance by the new velocities.
    """
    
    def __init__(
        self,
        backend: Optional[Backend] = None,
        debug: bool = False,
        debug_interval: int = 100
    ):
        """Initialize simulator.
        
        Args:
            backend: Compute backend (default: NumPy)
            debug: Print a state summary every debug_interval steps
            debug_interval: Steps between debug lines
        """
        self.backend = backend or get_backend("numpy")
        self.debug = debug
        self.debug_interval = max(1, debug_interval)
    
    def initial_state(self, initial_positions: Any) -> BodyState:
        """Validate initial positions and build the step-0 snapshot (bodies at rest)."""
        positions = validate_initial_positions(initial_positions)
        return BodyState(
            step=0,
            positions=self.backend.array(positions),
            velocities=self.backend.zeros(positions.shape),
        )
    
    def step(self, state: BodyState) -> BodyState:
        """Advance one step and return the new snapshot."""
        delta_v = compute_velocity_deltas(state.positions, self.backend)
        velocities = self.backend.add(state.velocities, delta_v)
        positions = self.backend.add(state.positions, velocities)
        return BodyState(state.step + 1, positions, velocities)
    
    def run(self, initial_positions: Any, steps: Any) -> Trajectory:
        """Simulate `steps` steps from rest.
        
        Args:
            initial_positions: 1-D sequence of N >= 1 integer positions
            steps: Non-negative integer step count
            
        Returns:
            Trajectory with steps + 1 rows
            
        Raises:
            ShapeError: initial_positions is not a non-empty 1-D sequence
            PositionValueError: initial_positions holds non-integer values
            StepCountError: steps is not a non-negative integer scalar
        """
        state = self.initial_state(initial_positions)
        count = validate_steps(steps)
        
        states = [state]
        for _ in range(count):
            state = self.step(state)
            states.append(state)
            if self.debug and state.step % self.debug_interval == 0:
                self._print_state(state)
        
        return Trajectory.from_states(states, self.backend)
    
    def _print_state(self, state: BodyState):
        pe = int(self.backend.to_numpy(self.backend.sum(self.backend.abs(state.positions))))
        ke = int(self.backend.to_numpy(self.backend.sum(self.backend.abs(state.velocities))))
        print(f"[{self.backend.name}] step {state.step}: PE={pe}, KE={ke}")


def simulate(initial_positions: Any, steps: Any, *, backend: Optional[Backend] = None) -> Trajectory:
    """Simulate bodies starting at rest at `initial_positions` for `steps` steps.
    
    Returns a Trajectory, which unpacks as
    (positions, velocities, potential_energies, kinetic_energies).
    
    The JAX backend computes in int32 unless jax_enable_x64 is set, and
    rejects initial positions outside the int32 range with PositionValueError.
    """
    return Simulator(backend).run(initial_positions, steps)
