from fastapi import Request

from gateway.adapters.implementations import (
    CryptoAdapter,
    DragonballAdapter,
    QuotesAdapter,
    UsersAdapter,
    WeatherAdapter,
)
from gateway.adapters.registry import ProviderRegistry
from gateway.core.config import Settings


def get_registry(request: Request) -> ProviderRegistry:
    """The provider registry built at startup and stored on the application."""
    return request.app.state.providers


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_weather_adapter(request: Request) -> WeatherAdapter:
    return get_registry(request).require(WeatherAdapter.key)


def get_quotes_adapter(request: Request) -> QuotesAdapter:
    return get_registry(request).require(QuotesAdapter.key)


def get_users_adapter(request: Request) -> UsersAdapter:
    return get_registry(request).require(UsersAdapter.key)


def get_crypto_adapter(request: Request) -> CryptoAdapter:
    return get_registry(request).require(CryptoAdapter.key)


def get_dragonball_adapter(request: Request) -> DragonballAdapter:
    return get_registry(request).require(DragonballAdapter.key)
