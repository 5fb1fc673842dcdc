"""Unit tests for RecipeImportService."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import httpx
import pytest
import respx

from recipe_engine.services.scraping.exceptions import (
    InvalidRecipeUrlError,
    RecipeNotFoundError,
    ScrapingFetchError,
    ScrapingTimeoutError,
)
from recipe_engine.services.scraping.service import (
    RecipeImportService,
    validate_recipe_url,
)


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from recipe_engine.core.config import Settings


pytestmark = pytest.mark.unit

URL = "https://example.com/recipes/pancakes"


@pytest.fixture
def mock_settings() -> MagicMock:
    """Create mock settings."""
    settings = MagicMock()
    settings.scraping.fetch_timeout = 5.0
    settings.scraping.user_agent = "test-agent"
    return settings


@pytest.fixture
def service(mock_settings: MagicMock) -> RecipeImportService:
    """Create a RecipeImportService with mocked settings."""
    with patch(
        "recipe_engine.services.scraping.service.get_settings",
        return_value=mock_settings,
    ):
        return RecipeImportService()


@pytest.fixture
async def initialized_service(
    service: RecipeImportService,
) -> AsyncGenerator[RecipeImportService]:
    """Service with an open HTTP client."""
    await service.initialize()
    try:
        yield service
    finally:
        await service.shutdown()


@pytest.fixture
def recipe_page(make_page: Callable[..., str]) -> str:
    """Page with a complete Recipe block."""
    return make_page(
        json.dumps(
            {
                "@type": "Recipe",
                "name": "Pancakes",
                "recipeYield": "4",
                "recipeIngredient": ["1 1/2 cups flour", "2 eggs"],
                "recipeInstructions": [{"@type": "HowToStep", "text": "Whisk."}],
            }
        )
    )


class TestValidateRecipeUrl:
    """Tests for URL validation."""

    def test_accepts_http_and_https(self) -> None:
        """Should return absolute http(s) URLs trimmed."""
        assert validate_recipe_url(" https://example.com/a ") == "https://example.com/a"
        assert validate_recipe_url("http://example.com/a") == "http://example.com/a"

    @pytest.mark.parametrize("url", [None, "", "   ", 42, ["https://example.com"]])
    def test_rejects_missing_or_non_string(self, url: object) -> None:
        """Should reject missing and non-string URLs."""
        with pytest.raises(InvalidRecipeUrlError, match="url is required"):
            validate_recipe_url(url)

    @pytest.mark.parametrize(
        "url",
        ["ftp://example.com/r", "example.com/recipe", "/recipes/1", "https://"],
    )
    def test_rejects_non_http_or_relative(self, url: str) -> None:
        """Should reject other schemes and URLs without a host."""
        with pytest.raises(InvalidRecipeUrlError):
            validate_recipe_url(url)


class TestRecipeImportServiceLifecycle:
    """Tests for service lifecycle methods."""

    async def test_initialize_creates_http_client(
        self,
        service: RecipeImportService,
    ) -> None:
        """Should create HTTP client on initialize."""
        assert service._http_client is None

        await service.initialize()

        assert isinstance(service._http_client, httpx.AsyncClient)
        assert service._http_client.headers["User-Agent"] == "test-agent"

        await service.shutdown()

    async def test_shutdown_closes_http_client(
        self,
        service: RecipeImportService,
    ) -> None:
        """Should close HTTP client on shutdown."""
        await service.initialize()

        await service.shutdown()

        assert service._http_client is None

    async def test_uses_explicit_settings(self, test_settings: Settings) -> None:
        """Should prefer settings passed to the constructor."""
        service = RecipeImportService(test_settings)
        await service.initialize()
        try:
            assert service._http_client is not None
            assert service._http_client.timeout.read == 2.0
        finally:
            await service.shutdown()


class TestRecipeImportServiceFetchHtml:
    """Tests for _fetch_html."""

    async def test_raises_when_not_initialized(
        self,
        service: RecipeImportService,
    ) -> None:
        """Should raise RuntimeError if service not initialized."""
        with pytest.raises(RuntimeError, match="not initialized"):
            await service._fetch_html(URL)

    @respx.mock
    async def test_returns_page_text(
        self,
        initialized_service: RecipeImportService,
    ) -> None:
        """Should return the response body."""
        respx.get(URL).mock(return_value=httpx.Response(200, text="<html></html>"))

        assert await initialized_service._fetch_html(URL) == "<html></html>"

    @respx.mock
    async def test_raises_timeout_error(
        self,
        initialized_service: RecipeImportService,
    ) -> None:
        """Should raise ScrapingTimeoutError on timeout."""
        respx.get(URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(ScrapingTimeoutError, match="Timed out"):
            await initialized_service._fetch_html(URL)

    @respx.mock
    async def test_folds_upstream_status_into_message(
        self,
        initialized_service: RecipeImportService,
    ) -> None:
        """Should raise ScrapingFetchError carrying the upstream status."""
        respx.get(URL).mock(return_value=httpx.Response(404))

        with pytest.raises(ScrapingFetchError, match=r"Failed to fetch page \(404\)") as exc:
            await initialized_service._fetch_html(URL)

        assert exc.value.status_code == 404

    @respx.mock
    async def test_raises_fetch_error_on_connection_failure(
        self,
        initialized_service: RecipeImportService,
    ) -> None:
        """Should raise ScrapingFetchError without a status on network errors."""
        respx.get(URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(ScrapingFetchError) as exc:
            await initialized_service._fetch_html(URL)

        assert exc.value.status_code is None
        assert not isinstance(exc.value, ScrapingTimeoutError)


class TestRecipeImportServiceImportRecipe:
    """Tests for import_recipe."""

    @respx.mock
    async def test_imports_recipe(
        self,
        initialized_service: RecipeImportService,
        recipe_page: str,
    ) -> None:
        """Should fetch and normalize the page."""
        respx.get(URL).mock(return_value=httpx.Response(200, text=recipe_page))

        draft = await initialized_service.import_recipe(URL)

        assert draft.title == "Pancakes"
        assert draft.servings == 4
        assert draft.source_url == URL
        assert [i.name for i in draft.ingredients] == ["1 1/2 cups flour", "2 eggs"]
        assert [s.instruction for s in draft.steps] == ["Whisk."]

    @respx.mock
    async def test_raises_not_found_without_recipe(
        self,
        initialized_service: RecipeImportService,
        make_page: Callable[..., str],
    ) -> None:
        """Should raise RecipeNotFoundError pointing to manual entry."""
        respx.get(URL).mock(
            return_value=httpx.Response(200, text=make_page('{"@type": "WebSite"}'))
        )

        with pytest.raises(RecipeNotFoundError, match="manually"):
            await initialized_service.import_recipe(URL)

    @respx.mock
    async def test_raises_not_found_when_all_blocks_malformed(
        self,
        initialized_service: RecipeImportService,
        make_page: Callable[..., str],
    ) -> None:
        """Should treat unparseable structured data as missing."""
        respx.get(URL).mock(
            return_value=httpx.Response(200, text=make_page("{oops", "[1,"))
        )

        with pytest.raises(RecipeNotFoundError):
            await initialized_service.import_recipe(URL)

    @respx.mock
    async def test_invalid_url_is_rejected_before_fetch(
        self,
        initialized_service: RecipeImportService,
    ) -> None:
        """Should not make a request for an invalid URL."""
        with pytest.raises(InvalidRecipeUrlError):
            await initialized_service.import_recipe("not a url")

        assert respx.calls.call_count == 0

    @respx.mock
    async def test_import_is_repeatable(
        self,
        initialized_service: RecipeImportService,
        recipe_page: str,
    ) -> None:
        """Should return equal drafts for repeated imports."""
        respx.get(URL).mock(return_value=httpx.Response(200, text=recipe_page))

        first = await initialized_service.import_recipe(URL)
        second = await initialized_service.import_recipe(URL)

        assert first == second
