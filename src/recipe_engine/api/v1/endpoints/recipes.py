"""Recipe endpoints.

Provides:
- POST /recipes/import for turning a recipe page URL into an editable draft
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from recipe_engine.api.dependencies import get_import_service
from recipe_engine.core.exceptions import (
    BadRequestException,
    ErrorResponse,
    UnprocessableContentException,
    UpstreamException,
)
from recipe_engine.observability.logging import get_logger
from recipe_engine.schemas.recipe import ImportRecipeRequest
from recipe_engine.services.scraping.exceptions import (
    InvalidRecipeUrlError,
    RecipeNotFoundError,
    ScrapingFetchError,
    ScrapingTimeoutError,
)
from recipe_engine.services.scraping.models import CanonicalRecipeDraft
from recipe_engine.services.scraping.service import RecipeImportService  # noqa: TC001


logger = get_logger(__name__)

router = APIRouter(tags=["Recipes"])


@router.post(
    "/recipes/import",
    response_model=CanonicalRecipeDraft,
    status_code=status.HTTP_200_OK,
    summary="Import a recipe from a URL",
    description=(
        "Fetches the page and normalizes its schema.org Recipe JSON-LD into a "
        "draft for the user to review. Nothing is stored."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        422: {"model": ErrorResponse, "description": "No recipe data on the page"},
        502: {"model": ErrorResponse, "description": "Recipe page fetch failed"},
        504: {"model": ErrorResponse, "description": "Recipe page fetch timed out"},
    },
)
async def import_recipe(
    request_body: ImportRecipeRequest,
    import_service: Annotated[RecipeImportService, Depends(get_import_service)],
) -> CanonicalRecipeDraft:
    """Import a recipe draft from ``request_body.url``.

    Raises:
        BadRequestException: 400 if the URL is missing or malformed.
        UpstreamException: 502/504 if the page could not be fetched.
        UnprocessableContentException: 422 if the page has no recipe data.
    """
    url = request_body.url
    logger.info("Importing recipe from URL", url=url)

    try:
        return await import_service.import_recipe(url)
    except InvalidRecipeUrlError as e:
        logger.info("Rejected recipe URL", url=url, reason=str(e))
        raise BadRequestException(str(e), error="INVALID_RECIPE_URL") from None
    except ScrapingTimeoutError as e:
        logger.warning("Recipe page fetch timed out", url=url)
        raise UpstreamException(
            str(e),
            error="UPSTREAM_TIMEOUT",
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        ) from None
    except ScrapingFetchError as e:
        logger.warning("Recipe page fetch failed", url=url, status_code=e.status_code)
        raise UpstreamException(str(e), error="UPSTREAM_FETCH_FAILED") from None
    except RecipeNotFoundError as e:
        logger.warning("No recipe found at URL", url=url)
        raise UnprocessableContentException(str(e), error="RECIPE_NOT_FOUND") from None
