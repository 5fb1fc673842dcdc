"""API request and response schemas."""

from recipe_engine.schemas.health import HealthResponse
from recipe_engine.schemas.reconciliation import (
    IngredientReconciliation,
    InventoryCandidate,
    MatchRequest,
    MatchResponse,
    ReconcileIngredientsRequest,
    ReconcileIngredientsResponse,
    ScaledIngredient,
    ScaleIngredientsRequest,
    ScaleIngredientsResponse,
    ShoppingCandidate,
)
from recipe_engine.schemas.recipe import ImportRecipeRequest


__all__ = [
    "HealthResponse",
    "ImportRecipeRequest",
    "IngredientReconciliation",
    "InventoryCandidate",
    "MatchRequest",
    "MatchResponse",
    "ReconcileIngredientsRequest",
    "ReconcileIngredientsResponse",
    "ScaleIngredientsRequest",
    "ScaleIngredientsResponse",
    "ScaledIngredient",
    "ShoppingCandidate",
]
