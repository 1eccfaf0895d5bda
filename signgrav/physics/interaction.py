"""Sign-gravity interaction rule.

Every body j pulls body i one unit of velocity toward it per step:
delta_v_i = Σ_j sign(x_j - x_i). The j == i term is sign(0) = 0, so the
vectorized form sums over all bodies without masking the diagonal.
"""

from typing import List, Sequence, Any
from signgrav.backends.base import Backend


def compute_velocity_deltas(positions: Any, backend: Backend) -> Any:
    """Velocity change of every body for one step (vectorized).
    
    Args:
        positions: Backend array of shape (N,)
        backend: Compute backend
        
    Returns:
        Backend array of shape (N,)
    """
    # diff[i, j] = x_j - x_i
    diff = backend.subtract(
        backend.expand_dims(positions, 0),
        backend.expand_dims(positions, 1),
    )
    return backend.sum(backend.sign(diff), axis=1)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compute_velocity_deltas_pairwise(positions: Sequence[int]) -> List[int]:
    """Velocity change of every body for one step, visiting each pair once.
    
    Pure-Python reference for compute_velocity_deltas: the pull of j on i
    is the negation of the pull of i on j, so each unordered pair is
    evaluated a single time.
    """
    count = len(positions)
    deltas = [0] * count
    for i in range(count):
        for j in range(i + 1, count):
            pull = _sign(int(positions[j]) - int(positions[i]))
            deltas[i] += pull
            deltas[j] -= pull
    return deltas
