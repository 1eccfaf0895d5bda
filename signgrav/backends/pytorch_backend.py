"""PyTorch backend implementation (optional, GPU support)."""

from typing import Any, Tuple, Union
import numpy as np
from signgrav.backends.base import Backend

try:
    import torch
    TORCH_AVAILABLE = True
except ImportError:
    TORCH_AVAILABLE = False


class PyTorchBackend(Backend):
    """PyTorch-based backend with GPU support."""
    
    def __init__(self, device: str = None):
        """Initialize PyTorch backend.
        
        Args:
            device: Device string (e.g., 'cpu', 'cuda:0'). Auto-selects if None.
        """
        if not TORCH_AVAILABLE:
            raise ImportError("PyTorch not available. Install with: pip install torch")
        
        if device is None:
            self._device = torch.device('cuda' if torch.cuda.is_available() else 'cpu')
        else:
            self._device = torch.device(device)
    
    @property
    def name(self) -> str:
        return "pytorch"
    
    @property
    def device(self) -> str:
        return str(self._device)
    
    @property
    def int_dtype(self) -> Any:
        return torch.int64
    
    def array(self, data: Any, dtype=None) -> Any:
        if isinstance(data, np.ndarray):
            tensor = torch.from_numpy(data).to(dtype or torch.int64)
        else:
            tensor = torch.tensor(data, dtype=dtype or torch.int64)
        return tensor.to(self._device)
    
    def zeros(self, shape: Tuple[int, ...], dtype=None) -> Any:
        return torch.zeros(shape, dtype=dtype or torch.int64, device=self._device)
    
    def sign(self, array: Any) -> Any:
        return torch.sign(array)
    
    def abs(self, array: Any) -> Any:
        return torch.abs(array)
    
    def sum(self, array: Any, axis: Union[int, Tuple[int, ...]] = None, keepdims: bool = False) -> Any:
        if axis is None:
            return torch.sum(array)
        return torch.sum(array, dim=axis, keepdim=keepdims)
    
    def add(self, a: Any, b: Any) -> Any:
        return torch.add(a, b)
    
    def subtract(self, a: Any, b: Any) -> Any:
        return torch.subtract(a, b)
    
    def expand_dims(self, array: Any, axis: int) -> Any:
        return torch.unsqueeze(array, dim=axis)
    
    def to_numpy(self, array: Any) -> np.ndarray:
        if isinstance(array, torch.Tensor):
            return array.detach().cpu().numpy()
        return np.asarray(array)
