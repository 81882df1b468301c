"""
Webinar API - Main Application Entry Point

Organizers create webinars and grow their seat count:
- POST /webinars                 organize a webinar
- POST /webinars/{id}/seats      change the seat count (organizer only)
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI

from webinar_api.core.config import get_settings
from webinar_api.core.logging import setup_logging, get_logger
from webinar_api.core.metrics import metrics_endpoint
from webinar_api.api.router import api_router
from webinar_api.api.middleware import RequestLoggingMiddleware
from webinar_api.container import AppContainer, build_container


def create_app(container: AppContainer | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    When ``container`` is given (tests), the lifespan hook uses it as-is and
    leaves its resources to the caller; otherwise the production container is
    built at startup and closed at shutdown.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle: startup and shutdown hooks."""
        setup_logging()
        logger = get_logger(__name__)

        logger.info(
            "application_starting",
            app=settings.APP_NAME,
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
        )

        owned = None
        if getattr(app.state, "container", None) is None:
            owned = build_container(settings)
            app.state.container = owned

        yield

        if owned is not None:
            await owned.close()
            app.state.container = None
        logger.info("application_shutdown")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Webinar scheduling API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.container = container

    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(api_router)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint for Docker and load balancers."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/metrics", tags=["Health"], include_in_schema=False)
    def metrics():
        return metrics_endpoint()

    return app


app = create_app()
