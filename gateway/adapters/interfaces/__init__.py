"""
Interfaces package for the gateway adapters.

Every provider adapter implements ProviderAdapter, so handlers and the
registry can treat them uniformly.
"""

from .provider import ProviderAdapter

__all__ = [
    'ProviderAdapter',
]
