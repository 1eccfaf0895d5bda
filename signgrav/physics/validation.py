"""Argument validation shared by every simulator entry point.

All checks run before a single step is simulated, so a bad call never
produces a partial trajectory.
"""

import operator
from typing import Any
import numpy as np
from signgrav.errors import ShapeError, PositionValueError, StepCountError

OUT_OF_RANGE = "initial positions out of int64 range"

# 2**63 as a float; every float in [-2**63, 2**63) converts to int64 exactly
_INT64_BOUND = 2.0 ** 63


def validate_initial_positions(initial_positions: Any) -> np.ndarray:
    """Check initial positions and return them as a 1-D int64 array.
    
    Args:
        initial_positions: Sequence of N >= 1 integer-valued numbers
        
    Returns:
        Array of shape (N,) with dtype int64
        
    Raises:
        ShapeError: If the input is not a non-empty 1-D sequence
        PositionValueError: If any value is non-numeric, non-finite, fractional
            or outside the int64 range
    """
    try:
        positions = np.asarray(initial_positions)
    except OverflowError as exc:
        raise PositionValueError(OUT_OF_RANGE) from exc
    except (TypeError, ValueError) as exc:
        # Ragged nested sequences cannot form an array at all
        raise ShapeError() from exc
    
    if positions.ndim != 1 or positions.size == 0:
        raise ShapeError()
    
    if positions.dtype == object:
        # Ragged input on numpy < 1.24, or Python ints too large for any integer dtype
        if any(np.ndim(value) != 0 for value in positions):
            raise ShapeError()
        raise PositionValueError(OUT_OF_RANGE if all(isinstance(v, int) for v in positions)
                                 else "initial positions must be numbers")
    
    if positions.dtype.kind not in "iuf":
        raise PositionValueError(f"initial positions must be numbers, got dtype {positions.dtype}")
    
    if positions.dtype.kind == "f":
        if not np.all(np.isfinite(positions)):
            raise PositionValueError("initial positions must be finite")
        if not np.all(positions == np.round(positions)):
            raise PositionValueError("initial positions must be integer-valued")
        if np.any(positions < -_INT64_BOUND) or np.any(positions >= _INT64_BOUND):
            raise PositionValueError(OUT_OF_RANGE)
    
    if positions.dtype.kind == "u" and np.any(positions > np.iinfo(np.int64).max):
        raise PositionValueError(OUT_OF_RANGE)
    
    return positions.astype(np.int64)


def validate_steps(steps: Any) -> int:
    """Check a step count and return it as a plain int.
    
    Raises:
        StepCountError: If steps is not a non-negative integer scalar
    """
    if isinstance(steps, (bool, np.bool_)) or np.ndim(steps) != 0:
        raise StepCountError()
    
    try:
        count = operator.index(steps)
    except TypeError as exc:
        raise StepCountError() from exc
    
    if count < 0:
        raise StepCountError()
    
    return count
