"""JAX backend implementation (optional, GPU support)."""

from typing import Any, Tuple, Union
import numpy as np
from signgrav.backends.base import Backend
from signgrav.errors import PositionValueError

try:
    import jax
    import jax.numpy as jnp
    JAX_AVAILABLE = True
except ImportError:
    JAX_AVAILABLE = False


class JAXBackend(Backend):
    """JAX-based backend with GPU support."""
    
    def __init__(self, device: str = None):
        """Initialize JAX backend.
        
        Args:
            device: Device string (e.g., 'cpu', 'gpu:0'). Auto-selects if None.
        """
        if not JAX_AVAILABLE:
            raise ImportError("JAX not available. Install with: pip install jax jaxlib")
        
        self._device = device or jax.devices()[0]
        # int64 needs jax_enable_x64; without it JAX silently truncates to int32
        self._dtype = jnp.int64 if jax.config.jax_enable_x64 else jnp.int32
    
    @property
    def name(self) -> str:
        return "jax"
    
    @property
    def device(self) -> str:
        return str(self._device)
    
    @property
    def int_dtype(self) -> Any:
        return self._dtype
    
    def array(self, data: Any, dtype=None) -> Any:
        dtype = dtype or self._dtype
        values = np.asarray(data)
        if values.dtype.kind in "iu" and values.size and jnp.dtype(dtype) == jnp.int32:
            limits = np.iinfo(np.int32)
            if values.min() < limits.min or values.max() > limits.max:
                raise PositionValueError(
                    "values exceed int32; enable jax_enable_x64 for 64-bit positions"
                )
        return jnp.array(data, dtype=dtype)
    
    def zeros(self, shape: Tuple[int, ...], dtype=None) -> Any:
        return jnp.zeros(shape, dtype=dtype or self._dtype)
    
    def sign(self, array: Any) -> Any:
        return jnp.sign(array)
    
    def abs(self, array: Any) -> Any:
        return jnp.abs(array)
    
    def sum(self, array: Any, axis: Union[int, Tuple[int, ...]] = None, keepdims: bool = False) -> Any:
        return jnp.sum(array, axis=axis, keepdims=keepdims)
    
    def add(self, a: Any, b: Any) -> Any:
        return jnp.add(a, b)
    
    def subtract(self, a: Any, b: Any) -> Any:
        return jnp.subtract(a, b)
    
    def expand_dims(self, array: Any, axis: int) -> Any:
        return jnp.expand_dims(array, axis=axis)
    
    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array)
