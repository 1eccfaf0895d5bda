"""Compute backend abstractions for the sign-gravity simulator."""

from signgrav.backends.base import Backend
from signgrav.backends.factory import get_backend, list_available_backends

__all__ = ["Backend", "get_backend", "list_available_backends"]
