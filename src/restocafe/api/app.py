"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from restocafe.api.menu import router as menu_router
from restocafe.api.notifications import router as notifications_router
from restocafe.app_logging import configure_logging
from restocafe.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.push_service.initialize()
        logger.info(
            "RestoCafe API started",
            extra={"environment": container.settings.environment},
        )
        yield
        app.state.container.push_service.teardown()
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(menu_router)
    app.include_router(notifications_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
