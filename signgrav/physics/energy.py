"""Energy and momentum bookkeeping.

These are not physical energies: potential energy is the sum of absolute
positions and kinetic energy the sum of absolute velocities. Every function
reduces over the last axis, so it works on a single state of shape (N,) and
on a stacked trajectory of shape (steps + 1, N) alike.
"""

import numpy as np


def potential_energy(positions) -> np.ndarray:
    """Σ|x_i| over bodies."""
    return np.sum(np.abs(positions), axis=-1)


def kinetic_energy(velocities) -> np.ndarray:
    """Σ|v_i| over bodies."""
    return np.sum(np.abs(velocities), axis=-1)


def total_energy(positions, velocities) -> np.ndarray:
    """Σ|x_i|·|v_i| over bodies (per-body product, then summed)."""
    return np.sum(np.abs(positions) * np.abs(velocities), axis=-1)


def momentum(velocities) -> np.ndarray:
    """Σv_i over bodies. Zero for every state reachable from rest."""
    return np.sum(velocities, axis=-1)


def center_position(positions) -> np.ndarray:
    """Mean body position."""
    return np.mean(positions, axis=-1)
