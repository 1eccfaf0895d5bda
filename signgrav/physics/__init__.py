"""Physics engine for one-dimensional sign-gravity simulations."""

from signgrav.physics.simulator import Simulator, simulate
from signgrav.physics.state import BodyState
from signgrav.physics.trajectory import Trajectory

__all__ = ["Simulator", "simulate", "BodyState", "Trajectory"]
