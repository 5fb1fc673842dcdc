"""Ingredient endpoints.

Provides:
- POST /ingredients/scale for rescaling ingredient lines to a serving count
- POST /ingredients/reconcile for matching ingredients against the
  shopping list and pantry inventory
- POST /ingredients/match for inspecting a single name comparison
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_engine.api.dependencies import get_reconciliation_service
from recipe_engine.schemas.reconciliation import (
    MatchRequest,
    MatchResponse,
    ReconcileIngredientsRequest,
    ReconcileIngredientsResponse,
    ScaleIngredientsRequest,
    ScaleIngredientsResponse,
)
from recipe_engine.services.reconciliation.matching import (
    significant_words,
    words_overlap,
)
from recipe_engine.services.reconciliation.service import (
    IngredientReconciliationService,  # noqa: TC001
)


router = APIRouter(tags=["Ingredients"])

ReconciliationService = Annotated[
    IngredientReconciliationService, Depends(get_reconciliation_service)
]


@router.post(
    "/ingredients/scale",
    response_model=ScaleIngredientsResponse,
    summary="Scale ingredient lines",
    description=(
        "Rewrites each line's leading quantity for a new serving count. "
        "Lines without a quantity are returned unchanged."
    ),
)
async def scale_ingredients(
    request_body: ScaleIngredientsRequest,
    service: ReconciliationService,
) -> ScaleIngredientsResponse:
    """Scale ingredient lines by an explicit factor or a serving ratio."""
    factor = service.resolve_factor(
        factor=request_body.factor,
        original_servings=request_body.original_servings,
        target_servings=request_body.target_servings,
    )
    return ScaleIngredientsResponse(
        factor=factor,
        ingredients=service.scale(request_body.ingredients, factor),
    )


@router.post(
    "/ingredients/reconcile",
    response_model=ReconcileIngredientsResponse,
    summary="Match ingredients against shopping list and pantry",
    description=(
        "For each ingredient, returns the scaled display text and the "
        "shopping list and inventory entries that fuzzy-match it."
    ),
)
async def reconcile_ingredients(
    request_body: ReconcileIngredientsRequest,
    service: ReconciliationService,
) -> ReconcileIngredientsResponse:
    """Build the per-ingredient match report for a recipe."""
    factor = service.resolve_factor(
        original_servings=request_body.original_servings,
        target_servings=request_body.target_servings,
    )
    return ReconcileIngredientsResponse(
        factor=factor,
        ingredients=service.reconcile(
            request_body.ingredients,
            shopping_items=request_body.shopping_items,
            inventory_items=request_body.inventory_items,
            factor=factor,
        ),
    )


@router.post(
    "/ingredients/match",
    response_model=MatchResponse,
    summary="Compare two names",
    description="Shows the significant words of both names and whether they match.",
)
async def match_names(request_body: MatchRequest) -> MatchResponse:
    """Compare an ingredient name with a candidate item name."""
    ingredient_words = significant_words(request_body.ingredient_name)
    candidate_words = significant_words(request_body.candidate_name)
    return MatchResponse(
        matched=words_overlap(ingredient_words, candidate_words),
        ingredient_words=sorted(ingredient_words),
        candidate_words=sorted(candidate_words),
    )
