"""
Sign Gravity - one-dimensional N-body simulation with a sign-only force.

Each body's velocity changes by the sum of sign(x_j - x_i) over every other
body, then its position advances by the new velocity.

Features:
- Vectorized step on NumPy, JAX or PyTorch backends
- Per-step positions, velocities, potential and kinetic energies
- Cycle-length detection
- Trajectory plots, JSON/YAML config and a CLI
"""

__version__ = "0.1.0"

from signgrav.errors import (
    SimulationInputError, ShapeError, PositionValueError, StepCountError, CycleNotFoundError
)
from signgrav.physics.simulator import Simulator, simulate
from signgrav.physics.trajectory import Trajectory
from signgrav.physics.diagnostics import find_cycle_length
from signgrav.backends.factory import get_backend, list_available_backends

__all__ = [
    "Simulator",
    "simulate",
    "Trajectory",
    "find_cycle_length",
    "get_backend",
    "list_available_backends",
    "SimulationInputError",
    "ShapeError",
    "PositionValueError",
    "StepCountError",
    "CycleNotFoundError",
]
