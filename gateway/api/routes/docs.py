from typing import Any, Dict

from fastapi import APIRouter, Depends

from gateway.api.dependencies import get_app_settings
from gateway.core.config import Settings

docs_router = APIRouter()

ENDPOINTS: Dict[str, str] = {
    "weather": "/api/weather/:city",
    "quotes": "/api/quotes",
    "quotes_by_author": "/api/quotes/author/:author",
    "users": "/api/users?limit=",
    "user": "/api/users/:id",
    "user_posts": "/api/users/:id/posts",
    "crypto": "/api/crypto/:symbol",
    "crypto_batch": "/api/crypto?symbols=BTC,ETH",
    "dragonball": "/api/dragonball/:id",
    "health": "/health",
}


@docs_router.get("/", summary="API documentation")
async def get_documentation(settings: Settings = Depends(get_app_settings)) -> Dict[str, Any]:
    """Static listing of the available endpoints."""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "endpoints": ENDPOINTS,
    }
