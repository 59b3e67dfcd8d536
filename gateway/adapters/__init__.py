"""
Adapters package for the gateway.

This package contains components for integrating with third-party APIs:
- The ProviderAdapter interface every adapter implements
- Concrete adapters for each provider
- Factory and registry for constructing and looking up adapter instances
"""

from . import interfaces

from .factory import ProviderFactory, create_http_client
from .registry import ProviderRegistry

__all__ = [
    'interfaces',
    'ProviderFactory',
    'ProviderRegistry',
    'create_http_client',
]
