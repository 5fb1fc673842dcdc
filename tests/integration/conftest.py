"""Integration test fixtures.

The app is built with test settings and served in-process through
``httpx.ASGITransport``. Upstream recipe pages are mocked with respx, which
patches only real network transports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from recipe_engine.core.config import get_settings
from recipe_engine.factory import create_app
from recipe_engine.services.reconciliation import IngredientReconciliationService
from recipe_engine.services.scraping import RecipeImportService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipe_engine.core.config import Settings


pytestmark = pytest.mark.integration


@pytest.fixture
async def app(test_settings: Settings) -> AsyncGenerator[FastAPI]:
    """Create the app with services wired as startup would wire them.

    ASGITransport does not send lifespan events, so the services are
    created here.
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings

    import_service = RecipeImportService(test_settings)
    await import_service.initialize()
    app.state.import_service = import_service
    app.state.reconciliation_service = IngredientReconciliationService()

    try:
        yield app
    finally:
        await import_service.shutdown()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def api_prefix(test_settings: Settings) -> str:
    """Mount point of the v1 API."""
    return test_settings.api.v1_prefix
