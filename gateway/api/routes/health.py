from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from gateway.adapters.registry import ProviderRegistry
from gateway.api.dependencies import get_app_settings, get_registry
from gateway.core.config import Settings
from gateway.core.logging import get_logger

health_router = APIRouter()
logger = get_logger(__name__)


class ProviderStatus(BaseModel):
    """Configuration status of a single provider."""
    name: str
    configured: bool
    details: Optional[Dict] = None


class HealthStatus(BaseModel):
    """Health status with per-provider configuration."""
    status: str
    version: str
    service: str
    providers: List[ProviderStatus]


@health_router.get(
    "",
    response_model=HealthStatus,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service status and whether each provider is configured. Providers are not contacted.",
)
async def get_health(
    registry: ProviderRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
) -> HealthStatus:
    logger.debug("Health check requested")

    providers = []
    for key in registry.list():
        capabilities = registry.require(key).get_capabilities()
        providers.append(
            ProviderStatus(
                name=key,
                configured=capabilities["configured"],
                details={"operations": capabilities["operations"], "base_url": capabilities["base_url"]},
            )
        )

    overall = "ok" if all(p.configured for p in providers) else "degraded"
    return HealthStatus(
        status=overall,
        version=settings.VERSION,
        service=settings.PROJECT_NAME,
        providers=providers,
    )
