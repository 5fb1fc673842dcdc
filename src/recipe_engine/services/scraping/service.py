"""Recipe import service.

Fetches a recipe page over HTTP and hands the markup to the JSON-LD
extractor. The service owns one ``httpx.AsyncClient`` for its lifetime and
performs no retries; importing the same URL twice is always safe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from recipe_engine.core.config import get_settings
from recipe_engine.observability.logging import get_logger
from recipe_engine.services.scraping.exceptions import (
    InvalidRecipeUrlError,
    RecipeNotFoundError,
    ScrapingFetchError,
    ScrapingTimeoutError,
)
from recipe_engine.services.scraping.jsonld import extract_recipe_from_jsonld


if TYPE_CHECKING:
    from recipe_engine.core.config import Settings
    from recipe_engine.services.scraping.models import CanonicalRecipeDraft


logger = get_logger(__name__)

ALLOWED_SCHEMES = frozenset({"http", "https"})


def validate_recipe_url(url: object) -> str:
    """Check that ``url`` is an absolute http(s) URL.

    Returns:
        The URL with surrounding whitespace removed.

    Raises:
        InvalidRecipeUrlError: If the URL is missing, not a string, or not
            an absolute http(s) URL.
    """
    if not isinstance(url, str) or not url.strip():
        msg = "url is required"
        raise InvalidRecipeUrlError(msg)

    url = url.strip()
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        msg = f"Invalid URL: {e}"
        raise InvalidRecipeUrlError(msg) from e

    if parsed.scheme not in ALLOWED_SCHEMES or not parsed.host:
        msg = f"URL must be an absolute http or https URL: {url}"
        raise InvalidRecipeUrlError(msg)

    return url


class RecipeImportService:
    """Service for importing recipes from web pages.

    Example:
        ```python
        service = RecipeImportService()
        await service.initialize()

        draft = await service.import_recipe("https://example.com/recipe")
        print(draft.title, [i.name for i in draft.ingredients])

        await service.shutdown()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the import service.

        Args:
            settings: Optional settings override; defaults to get_settings().
        """
        self._settings = settings or get_settings()
        self._http_client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Create the shared HTTP client."""
        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.scraping.fetch_timeout),
            follow_redirects=True,
            headers={
                "User-Agent": self._settings.scraping.user_agent,
                "Accept": (
                    "text/html,application/xhtml+xml,application/xml;"
                    "q=0.9,*/*;q=0.8"
                ),
                "Accept-Language": "en-US,en;q=0.5",
            },
        )
        logger.info("RecipeImportService initialized")

    async def shutdown(self) -> None:
        """Release resources."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("RecipeImportService shutdown")

    async def import_recipe(self, url: object) -> CanonicalRecipeDraft:
        """Fetch ``url`` and normalize its schema.org Recipe data.

        Args:
            url: The recipe page URL as sent by the client.

        Returns:
            The canonical recipe draft.

        Raises:
            InvalidRecipeUrlError: If the URL is missing or malformed.
            ScrapingFetchError: If the page could not be retrieved.
            ScrapingTimeoutError: If the request times out.
            RecipeNotFoundError: If the page has no Recipe structured data.
        """
        url = validate_recipe_url(url)
        html = await self._fetch_html(url)

        draft = extract_recipe_from_jsonld(html, url)
        if draft is None:
            logger.warning("No recipe structured data found", url=url)
            msg = (
                "No recipe structured data found on this page. "
                "The site may not publish schema.org Recipe data; "
                "try entering the recipe manually."
            )
            raise RecipeNotFoundError(msg)

        logger.info(
            "Imported recipe",
            url=url,
            title=draft.title,
            ingredients=len(draft.ingredients),
            steps=len(draft.steps),
        )
        return draft

    async def _fetch_html(self, url: str) -> str:
        """Fetch page text from ``url``.

        Raises:
            ScrapingFetchError: If the request fails or returns non-2xx.
            ScrapingTimeoutError: If the request times out.
        """
        if not self._http_client:
            msg = "Service not initialized. Call initialize() first."
            raise RuntimeError(msg)

        try:
            response = await self._http_client.get(url)
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.warning("Request timed out", url=url, error=str(e))
            error_msg = f"Timed out fetching {url}"
            raise ScrapingTimeoutError(error_msg) from e

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning("HTTP error fetching URL", url=url, status_code=status_code)
            error_msg = f"Failed to fetch page ({status_code})"
            raise ScrapingFetchError(error_msg, status_code=status_code) from e

        except httpx.RequestError as e:
            logger.warning("Request error fetching URL", url=url, error=str(e))
            error_msg = f"Failed to fetch {url}: {e}"
            raise ScrapingFetchError(error_msg) from e

        else:
            html: str = response.text
            return html
