"""Recipe import request schema.

The response is ``CanonicalRecipeDraft`` itself, serialized snake_case.
"""

from __future__ import annotations

from pydantic import Field

from recipe_engine.schemas.base import APIRequest


class ImportRecipeRequest(APIRequest):
    """Body of ``POST /recipes/import``."""

    url: str | None = Field(
        default=None,
        description="Absolute http(s) URL of the recipe page",
        examples=["https://example.com/recipes/banana-bread"],
    )
