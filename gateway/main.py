from contextlib import asynccontextmanager
import time
from typing import AsyncIterator, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from gateway.adapters.factory import ProviderFactory
from gateway.adapters.registry import ProviderRegistry
from gateway.api.error_handlers import setup_exception_handlers
from gateway.core.config import Settings, get_settings, load_env_file
from gateway.core.logging import configure_logging, get_logger, set_correlation_id


# Load environment variables and configure logging early
load_env_file()
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Build the provider registry on startup unless one was injected, and
    close the shared HTTP client on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.PROJECT_NAME}")

    owns_providers = app.state.providers is None
    if owns_providers:
        app.state.providers = ProviderFactory(settings).build_registry()

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    if owns_providers:
        await app.state.providers.aclose()
        app.state.providers = None


def create_application(
    settings: Optional[Settings] = None,
    registry: Optional[ProviderRegistry] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings, defaults to the cached environment settings
        registry: Pre-built provider registry; built at startup when omitted

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.providers = registry

    configure_middleware(app, settings)
    setup_exception_handlers(app)
    register_routers(app)

    return app


def configure_middleware(app: FastAPI, settings: Settings) -> None:
    """
    Configure middleware components for the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next: Callable):
        correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {str(e)}",
                extra={
                    "request_path": request.url.path,
                    "method": request.method,
                    "process_time_ms": round(process_time * 1000, 2),
                },
                exc_info=True,
            )
            raise

        response.headers["X-Correlation-ID"] = correlation_id
        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2),
            },
        )
        return response


def register_routers(app: FastAPI) -> None:
    """
    Register API routers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    # Import routers here to avoid circular imports
    from gateway.api.routes.crypto import crypto_router
    from gateway.api.routes.docs import docs_router
    from gateway.api.routes.dragonball import dragonball_router
    from gateway.api.routes.health import health_router
    from gateway.api.routes.quotes import quotes_router
    from gateway.api.routes.users import users_router
    from gateway.api.routes.weather import weather_router

    app.include_router(docs_router, tags=["Documentation"])
    app.include_router(health_router, prefix="/health", tags=["Health"])
    app.include_router(weather_router, prefix="/api/weather", tags=["Weather"])
    app.include_router(quotes_router, prefix="/api/quotes", tags=["Quotes"])
    app.include_router(users_router, prefix="/api/users", tags=["Users"])
    app.include_router(crypto_router, prefix="/api/crypto", tags=["Crypto"])
    app.include_router(dragonball_router, prefix="/api/dragonball", tags=["Dragonball"])


app = create_application()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
