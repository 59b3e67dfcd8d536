import logging
from typing import Dict, List, Optional, Type

import httpx

from gateway.adapters.implementations import (
    CryptoAdapter,
    DragonballAdapter,
    QuotesAdapter,
    UsersAdapter,
    WeatherAdapter,
)
from gateway.adapters.interfaces.provider import ProviderAdapter
from gateway.adapters.registry import ProviderRegistry
from gateway.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: Dict[str, Type[ProviderAdapter]] = {
    adapter_class.key: adapter_class
    for adapter_class in (WeatherAdapter, QuotesAdapter, UsersAdapter, CryptoAdapter, DragonballAdapter)
}


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Create the shared outbound client.

    Args:
        settings: Application settings supplying the default timeout
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.DEFAULT_TIMEOUT),
        headers={"User-Agent": f"{settings.PROJECT_NAME}/{settings.VERSION}"},
        follow_redirects=True,
    )


class ProviderFactory:
    """
    Factory for creating provider adapters.
    Every adapter is built once from settings around a shared HTTP client.
    """

    def __init__(self, settings: Optional[Settings] = None, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the provider factory.

        Args:
            settings: Application settings, defaults to the cached settings
            http_client: Client to hand to adapters, created from settings if omitted
        """
        self.settings = settings or get_settings()
        self.http_client = http_client or create_http_client(self.settings)

    def create_provider(self, key: str) -> ProviderAdapter:
        """
        Create the adapter registered under ``key``.

        Raises:
            ValueError: If ``key`` names no known provider
        """
        adapter_class = PROVIDER_CLASSES.get(key)
        if adapter_class is None:
            raise ValueError(f"Unknown provider '{key}'")
        return adapter_class.from_settings(self.settings, self.http_client)

    def get_provider_keys(self) -> List[str]:
        return list(PROVIDER_CLASSES.keys())

    def build_registry(self) -> ProviderRegistry:
        """Build a registry holding one adapter per known provider."""
        registry = ProviderRegistry(http_client=self.http_client)
        for key in self.get_provider_keys():
            registry.register(key, self.create_provider(key))

        unconfigured = [key for key in registry.list() if not registry.require(key).is_configured()]
        if unconfigured:
            logger.warning(f"Providers missing configuration: {', '.join(unconfigured)}")
        return registry
