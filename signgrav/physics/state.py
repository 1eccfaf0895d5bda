"""Immutable per-step snapshot of the bodies."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BodyState:
    """Positions and velocities of every body after `step` steps.
    
    Arrays are backend arrays of shape (N,). The simulator never mutates a
    snapshot; each step produces a new one from the previous.
    """
    step: int
    positions: Any
    velocities: Any
