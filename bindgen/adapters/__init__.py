"""Adapters — bindings for the external toolchain.

Public re-exports for convenient access.
"""

from bindgen.adapters.base import Adapter, ExecutionContext
from bindgen.adapters.mock import MockAdapter
from bindgen.adapters.registry import AdapterRegistry, default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "MockAdapter",
    "default_registry",
]
