"""Backend factory for creating and managing compute backends."""

from typing import List, Optional
from signgrav.backends.base import Backend
from signgrav.backends.numpy_backend import NumPyBackend
from signgrav.backends.jax_backend import JAXBackend, JAX_AVAILABLE
from signgrav.backends.pytorch_backend import PyTorchBackend, TORCH_AVAILABLE

# Optional backends - only registered when their library imports
_jax_backend = JAXBackend if JAX_AVAILABLE else None
_pytorch_backend = PyTorchBackend if TORCH_AVAILABLE else None


def list_available_backends() -> List[str]:
    """List all available backends.
    
    Returns:
        List of backend names that can be instantiated
    """
    backends = ["numpy"]  # Always available
    
    if _jax_backend is not None:
        backends.append("jax")
    
    if _pytorch_backend is not None:
        backends.append("pytorch")
    
    return backends


def get_backend(name: Optional[str] = None, prefer_gpu: bool = False) -> Backend:
    """Get a backend instance.
    
    Args:
        name: Backend name ('numpy', 'jax', 'pytorch'). If None, auto-selects.
        prefer_gpu: If True and name is None, prefer accelerator backends over NumPy.
        
    Returns:
        Backend instance
        
    Raises:
        ValueError: If requested backend is not available
    """
    if name is None:
        if prefer_gpu:
            for candidate in (_jax_backend, _pytorch_backend):
                if candidate is None:
                    continue
                try:
                    return candidate()
                except (ImportError, RuntimeError):
                    continue
        
        # Fallback to NumPy
        return NumPyBackend()
    
    name_lower = name.lower()
    
    if name_lower == "numpy":
        return NumPyBackend()
    elif name_lower == "jax":
        if _jax_backend is None:
            raise ValueError("JAX backend not available. Install with: pip install jax jaxlib")
        return _jax_backend()
    elif name_lower == "pytorch":
        if _pytorch_backend is None:
            raise ValueError("PyTorch backend not available. Install with: pip install torch")
        return _pytorch_backend()
    else:
        available = list_available_backends()
        raise ValueError(f"Unknown backend '{name}'. Available: {available}")
