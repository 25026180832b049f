"""
FastAPI application entry point for the carousel generator.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carousel import __version__
from carousel.api import router, setup_error_handlers
from carousel.api.schemas import HealthResponse
from carousel.infra.config.logging_config import get_logger, setup_logging
from carousel.infra.config.settings import get_settings
from carousel.infra.middleware.request_context import RequestContextMiddleware

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings)
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
        text_provider=settings.text_provider,
        image_provider=settings.image_provider or None,
        fallback_enabled=settings.fallback_enabled,
    )

    yield

    logger.info("app.shutdown", app_name=settings.app_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Turns a topic into an illustrated social media carousel",
        version=__version__,
        debug=settings.debug,
        docs_url=None if settings.is_production() else "/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(
        RequestContextMiddleware,
        text_provider=settings.text_provider,
        image_provider=settings.image_provider or None,
    )

    setup_error_handlers(app)
    app.include_router(router, prefix="/api")

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        current = get_settings()
        return HealthResponse(
            status="healthy",
            service=current.app_name,
            version=__version__,
            text_provider=current.text_provider,
            image_provider=current.image_provider or None,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "carousel.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
