"""FastAPI dependencies for service access.

Services are created during application startup and stored in app.state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from recipe_engine.core.exceptions import ServiceUnavailableException


if TYPE_CHECKING:
    from recipe_engine.services.reconciliation import IngredientReconciliationService
    from recipe_engine.services.scraping import RecipeImportService


async def get_import_service(request: Request) -> RecipeImportService:
    """Get the recipe import service from app state.

    Raises:
        ServiceUnavailableException: If the service is not initialized.
    """
    service: RecipeImportService | None = getattr(
        request.app.state, "import_service", None
    )
    if service is None:
        msg = "Recipe import service not available"
        raise ServiceUnavailableException(msg)
    return service


async def get_reconciliation_service(
    request: Request,
) -> IngredientReconciliationService:
    """Get the ingredient reconciliation service from app state.

    Raises:
        ServiceUnavailableException: If the service is not initialized.
    """
    service: IngredientReconciliationService | None = getattr(
        request.app.state, "reconciliation_service", None
    )
    if service is None:
        msg = "Ingredient reconciliation service not available"
        raise ServiceUnavailableException(msg)
    return service
