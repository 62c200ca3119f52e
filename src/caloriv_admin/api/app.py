"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from caloriv_admin.api import (
    announcements,
    approvals,
    auth,
    dashboard,
    exercises,
    foods,
    promotions,
    updates,
    users,
)
from caloriv_admin.app_logging import configure_logging
from caloriv_admin.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Caloriv Admin", lifespan=lifespan)
    app.state.container = container

    app.include_router(auth.router)
    app.include_router(dashboard.router)
    app.include_router(foods.router)
    app.include_router(exercises.router)
    app.include_router(users.router)
    app.include_router(approvals.router)
    app.include_router(announcements.router)
    app.include_router(promotions.router)
    app.include_router(updates.router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
