"""Application lifespan event handlers.

Startup configures logging and creates the services stored on
``app.state``; shutdown closes the import service's HTTP client.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipe_engine.core.config import get_settings
from recipe_engine.observability.logging import get_logger, setup_logging
from recipe_engine.services.reconciliation import IngredientReconciliationService
from recipe_engine.services.scraping import RecipeImportService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipe_engine.core.config import Settings


logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services."""
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    import_service = RecipeImportService(settings)
    await import_service.initialize()
    app.state.import_service = import_service

    app.state.reconciliation_service = IngredientReconciliationService()

    logger.info("Application startup complete")


async def _shutdown(app: FastAPI) -> None:
    """Release resources held by application services."""
    logger.info("Shutting down application")

    import_service: RecipeImportService | None = getattr(
        app.state, "import_service", None
    )
    if import_service is not None:
        await import_service.shutdown()
        app.state.import_service = None

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Run startup before serving and shutdown afterwards."""
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app)
