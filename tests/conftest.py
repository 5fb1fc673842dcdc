"""Shared test fixtures for the recipe import engine tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_engine.core.config import Settings
from recipe_engine.core.config.settings import (
    ApiSettings,
    AppSettings,
    LoggingSettings,
    ScrapingSettings,
)


if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the ``test`` environment with a short fetch timeout."""
    return Settings(
        APP_ENV="test",
        app=AppSettings(name="test-app", version="0.0.1-test", debug=True),
        api=ApiSettings(cors_origins=["http://localhost:3000"]),
        logging=LoggingSettings(level="DEBUG", format="text"),
        scraping=ScrapingSettings(fetch_timeout=2.0, user_agent="test-agent"),
    )


@pytest.fixture
def recipe_url() -> str:
    """URL used for imported test recipes."""
    return "https://example.com/recipes/banana-bread"


@pytest.fixture
def make_page() -> Callable[..., str]:
    """Build a minimal HTML page from raw JSON-LD block bodies."""

    def _make_page(*blocks: str) -> str:
        scripts = "\n".join(
            f'<script type="application/ld+json">{block}</script>' for block in blocks
        )
        return f"<html><head>{scripts}</head><body><h1>Recipe</h1></body></html>"

    return _make_page
