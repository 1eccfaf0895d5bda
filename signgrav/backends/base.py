"""Abstract base class for compute backends."""

from abc import ABC, abstractmethod
from typing import Any, Tuple, Union
import numpy as np


class Backend(ABC):
    """Abstract interface for array computation backends.
    
    This allows the same simulation code to run on different execution
    engines (NumPy, JAX, PyTorch) with a unified API. All simulation
    quantities are integers, so backends expose an integer dtype.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this backend."""
        pass
    
    @property
    @abstractmethod
    def device(self) -> str:
        """Return the device type (e.g., 'cpu', 'cuda:0')."""
        pass
    
    @property
    @abstractmethod
    def int_dtype(self) -> Any:
        """Return the integer dtype used for positions and velocities."""
        pass
    
    @abstractmethod
    def array(self, data: Any, dtype=None) -> Any:
        """Create an array from data.
        
        Args:
            data: Input data (list, numpy array, etc.)
            dtype: Optional data type (defaults to int_dtype)
            
        Returns:
            Backend array object
        """
        pass
    
    @abstractmethod
    def zeros(self, shape: Tuple[int, ...], dtype=None) -> Any:
        """Create an integer array of zeros.
        
        Args:
            shape: Array shape
            dtype: Optional data type (defaults to int_dtype)
            
        Returns:
            Zero-filled array
        """
        pass
    
    @abstractmethod
    def sign(self, array: Any) -> Any:
        """Element-wise sign (-1, 0 or +1)."""
        pass
    
    @abstractmethod
    def abs(self, array: Any) -> Any:
        """Element-wise absolute value."""
        pass
    
    @abstractmethod
    def sum(self, array: Any, axis: Union[int, Tuple[int, ...]] = None, keepdims: bool = False) -> Any:
        """Sum array elements along axis."""
        pass
    
    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """Element-wise addition."""
        pass
    
    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any:
        """Element-wise subtraction."""
        pass
    
    @abstractmethod
    def expand_dims(self, array: Any, axis: int) -> Any:
        """Expand the shape by inserting a new axis at axis (e.g. (n,) -> (n, 1))."""
        pass
    
    @abstractmethod
    def to_numpy(self, array: Any) -> np.ndarray:
        """Convert backend array to NumPy array.
        
        This is needed for trajectory assembly, rendering and reporting.
        """
        pass
