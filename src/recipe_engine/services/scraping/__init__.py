"""Recipe import: page fetch and JSON-LD normalization."""

from recipe_engine.services.scraping.jsonld import extract_recipe_from_jsonld
from recipe_engine.services.scraping.models import (
    CanonicalRecipeDraft,
    DraftIngredient,
    DraftStep,
)
from recipe_engine.services.scraping.service import RecipeImportService


__all__ = [
    "CanonicalRecipeDraft",
    "DraftIngredient",
    "DraftStep",
    "RecipeImportService",
    "extract_recipe_from_jsonld",
]
