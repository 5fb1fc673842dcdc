"""Recipe import exceptions.

Raised by ``RecipeImportService`` and translated into HTTP error payloads
by the recipes endpoint. Extraction itself never raises; these only mark
the outcome of a whole import.
"""

from __future__ import annotations


class ScrapingError(Exception):
    """Base exception for recipe import errors."""


class InvalidRecipeUrlError(ScrapingError):
    """Raised when the requested URL is missing or not an http(s) URL.

    Checked before any network request is made.
    """


class ScrapingFetchError(ScrapingError):
    """Raised when the recipe page could not be retrieved.

    ``status_code`` holds the upstream HTTP status when there was a
    response at all.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ScrapingTimeoutError(ScrapingFetchError):
    """Raised when fetching the recipe page times out."""


class RecipeNotFoundError(ScrapingError):
    """Raised when the page was fetched but holds no schema.org Recipe."""
