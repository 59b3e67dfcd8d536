# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Every provider is replaced by an httpx.MockTransport backed by ProviderStub,
# which records each outbound request so tests can assert call counts.
# =============================================================================

import os

# Keep a developer's real credentials out of the test run
os.environ.pop("WEATHER_API_KEY", None)
os.environ.pop("DRAGONBALL_API_KEY", None)

from typing import Any, Callable, Dict, List, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.adapters.factory import ProviderFactory
from gateway.core.config import Settings
from gateway.main import create_application

StubResponse = Union[httpx.Response, Callable[[httpx.Request], Any]]


class ProviderStub:
    """Routes outbound requests by URL path to canned responses."""

    def __init__(self):
        self.routes: Dict[str, StubResponse] = {}
        self.calls: List[httpx.Request] = []

    def add(self, path: str, json: Any = None, status_code: int = 200) -> None:
        self.routes[path] = httpx.Response(status_code, json=json)

    def add_handler(self, path: str, handler: Callable[[httpx.Request], Any]) -> None:
        self.routes[path] = handler

    def calls_to(self, path: str) -> int:
        return sum(1 for request in self.calls if request.url.path == path)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": f"no stub for {request.url.path}"})
        if isinstance(route, httpx.Response):
            return httpx.Response(route.status_code, content=route.content, headers=route.headers)
        result = route(request)
        if hasattr(result, "__await__"):
            result = await result
        return result


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def provider_stub() -> ProviderStub:
    return ProviderStub()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        WEATHER_API_KEY="test-weather-key",
        DRAGONBALL_API_KEY=None,
        ENABLE_STRUCTURED_LOGGING=False,
    )


@pytest.fixture
def http_client(provider_stub: ProviderStub) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(provider_stub))


@pytest.fixture
def registry(settings: Settings, http_client: httpx.AsyncClient):
    return ProviderFactory(settings, http_client).build_registry()


@pytest.fixture
def client(settings: Settings, registry):
    app = create_application(settings=settings, registry=registry)
    with TestClient(app) as test_client:
        yield test_client
