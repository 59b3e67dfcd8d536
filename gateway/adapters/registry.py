import logging
from typing import Dict, List, Optional

import httpx

from gateway.adapters.interfaces.provider import ProviderAdapter

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Registry of constructed provider adapters.

    Maps provider keys to the adapter instances built at process start, and
    owns the shared HTTP client they use so it can be closed on shutdown.
    """

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize an empty provider registry.

        Args:
            http_client: Client shared by the registered adapters, closed by ``aclose``
        """
        self._providers: Dict[str, ProviderAdapter] = {}
        self.http_client = http_client
        logger.debug("Initialized ProviderRegistry")

    def register(self, key: str, adapter: ProviderAdapter) -> None:
        """
        Register an adapter instance.

        Args:
            key: Identifier for the provider
            adapter: Adapter to serve requests for this provider

        Raises:
            ValueError: If the key is invalid or already registered
        """
        if not key or not isinstance(key, str):
            raise ValueError("Provider key must be a non-empty string")

        if not isinstance(adapter, ProviderAdapter):
            raise ValueError("Adapter must be an instance of ProviderAdapter")

        if key in self._providers:
            raise ValueError(f"Provider '{key}' is already registered")

        self._providers[key] = adapter
        logger.info(f"Registered provider: {key}")

    def require(self, key: str) -> ProviderAdapter:
        """
        Retrieve an adapter by key.

        Raises:
            LookupError: If no adapter is registered under ``key``
        """
        adapter = self._providers.get(key)
        if adapter is None:
            raise LookupError(f"Provider '{key}' is not registered")
        return adapter

    def list(self) -> List[str]:
        """List all registered provider keys."""
        return list(self._providers.keys())

    async def aclose(self) -> None:
        """Close the shared HTTP client, if any."""
        if self.http_client is not None and not self.http_client.is_closed:
            await self.http_client.aclose()
            logger.debug("Closed provider HTTP client")
