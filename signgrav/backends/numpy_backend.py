"""NumPy backend implementation."""

from typing import Any, Tuple, Union
import numpy as np
from signgrav.backends.base import Backend


class NumPyBackend(Backend):
    """NumPy-based backend (baseline, always available)."""
    
    @property
    def name(self) -> str:
        return "numpy"
    
    @property
    def device(self) -> str:
        return "cpu"
    
    @property
    def int_dtype(self) -> Any:
        return np.int64
    
    def array(self, data: Any, dtype=None) -> np.ndarray:
        return np.array(data, dtype=dtype or self.int_dtype)
    
    def zeros(self, shape: Tuple[int, ...], dtype=None) -> np.ndarray:
        return np.zeros(shape, dtype=dtype or self.int_dtype)
    
    def sign(self, array: Any) -> np.ndarray:
        return np.sign(array)
    
    def abs(self, array: Any) -> np.ndarray:
        return np.abs(array)
    
    def sum(self, array: Any, axis: Union[int, Tuple[int, ...]] = None, keepdims: bool = False) -> np.ndarray:
        return np.sum(array, axis=axis, keepdims=keepdims)
    
    def add(self, a: Any, b: Any) -> np.ndarray:
        return np.add(a, b)
    
    def subtract(self, a: Any, b: Any) -> np.ndarray:
        return np.subtract(a, b)
    
    def expand_dims(self, array: Any, axis: int) -> np.ndarray:
        return np.expand_dims(array, axis=axis)
    
    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array)
