"""
Main FastAPI application entry point.

Uses Application Factory Pattern with an explicit Settings object.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from serrurier.config.settings import Settings, get_settings
from serrurier.di.container import DIContainer
from serrurier.domain.exceptions import SerrurierException
from serrurier.infrastructure.monitoring import get_logger, setup_logging
from serrurier.presentation.api.middleware import (
    http_exception_handler,
    serrurier_exception_handler,
    validation_exception_handler,
)
from serrurier.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from serrurier.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)
from serrurier.presentation.api.routes import auth, health, wallet


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)
        container: Optional prebuilt DI container (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()
    if container is None:
        container = DIContainer(settings)

    # Setup structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating {settings.APP_NAME} application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting {settings.APP_NAME} application...")
        await container.initialize()
        logger.info(
            f"{settings.APP_NAME} application started "
            f"(caller auth: {settings.CALLER_AUTH_MODE})"
        )

        yield

        logger.info(f"Shutting down {settings.APP_NAME} application...")
        await container.shutdown()
        logger.info(f"{settings.APP_NAME} application shutdown complete")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Ethereum wallet authentication and account binding",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.settings = settings

    # Middleware chain (last added runs first)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(SerrurierException, serrurier_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Register routes
    app.include_router(health.router)
    app.include_router(wallet.router)
    app.include_router(auth.router)

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info(f"{settings.APP_NAME} application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance (lazy initialization).

    For uvicorn: uvicorn serrurier.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    # Use factory mode for proper lazy initialization
    settings = get_settings()
    uvicorn.run(
        "serrurier.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
