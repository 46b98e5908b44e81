"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from sportalk.interface.api.routes import comments, follows, health, media, posts
from sportalk.util.di.container import create_container, setup_di
from sportalk.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use, the production container when None
    """
    app_instance = FastAPI(
        title="Sportalk API",
        description="Backend API for Sportalk - sports posts, comments, media and follows",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(media.router)
    app_instance.include_router(follows.router)

    return app_instance
