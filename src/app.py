"""LAMP diagnostics — FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from src.config import Settings, get_settings
from src.middleware import (
    configure_cors,
    configure_routing_errors,
    lifespan,
    logging_middleware,
)
from src.routers import health, metrics, pages, security


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    # Exact paths only: no generated docs, no trailing-slash redirects
    app = FastAPI(
        title=settings.app_name,
        description="Diagnostic endpoints for the LAMP deployment",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    # Store settings on app state
    app.state.settings = settings

    # Routers
    app.include_router(pages.router)
    app.include_router(health.router)
    app.include_router(security.router)
    app.include_router(metrics.router)

    # Middleware; CORS only covers the routes registered above
    app.middleware("http")(logging_middleware)
    configure_cors(app, settings)
    configure_routing_errors(app)

    return app


# Default app instance for uvicorn
app = create_app()
