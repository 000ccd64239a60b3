"""Sort Service API: FastAPI application entry point.

Invariants:
    - create_app(settings) is the composition root: settings are passed in, not read globally
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SortServiceError → structured JSON responses
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Module-level `app` built from get_settings() so ASGI servers can import it
    - run() starts uvicorn on settings.host/settings.port (PORT env, default 3000)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from sort_service.api.error_handlers import register_error_handlers
from sort_service.api.routes import greeting, health, sort
from sort_service.config import Settings, get_settings
from sort_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application from explicit settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"Server is running on port {settings.port}",
            extra={"port": settings.port},
        )
        yield
        logger.info("Sort service shutting down")

    app = FastAPI(title="Sort Service", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    # Routes: explicit registration
    app.include_router(greeting.router)
    app.include_router(health.router)
    app.include_router(sort.router)

    register_error_handlers(app)
    return app


app = create_app()


def run(settings: Settings | None = None) -> None:
    """Serve the application with uvicorn.

    Without explicit settings the module-level app (built from get_settings())
    is served as-is.
    """
    if settings is None:
        settings, application = get_settings(), app
    else:
        application = create_app(settings)
    uvicorn.run(
        application,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
