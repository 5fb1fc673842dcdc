"""Ingredient scaling and reconciliation schemas.

Shopping and inventory candidates are read-only projections of the
caller's stored lists; the service only compares their names.
"""

from __future__ import annotations

import math

from pydantic import Field, field_validator

from recipe_engine.schemas.base import APIRequest, APIResponse


# =============================================================================
# Match Candidates
# =============================================================================


class ShoppingCandidate(APIRequest):
    """An entry of the user's shopping list."""

    name: str = Field(..., description="Item text as shown in the list")
    is_checked: bool = Field(default=False, description="Already ticked off")


class InventoryCandidate(APIRequest):
    """An entry of the user's pantry inventory."""

    name: str = Field(..., description="Item name")
    quantity: float | None = Field(default=None, description="Amount on hand")


# =============================================================================
# Scaling
# =============================================================================


class _ServingsMixin(APIRequest):
    original_servings: int | None = Field(
        default=None,
        gt=0,
        description="Servings the recipe was written for",
    )
    target_servings: int | None = Field(
        default=None,
        gt=0,
        description="Servings to display",
    )


class ScaleIngredientsRequest(_ServingsMixin):
    """Body of ``POST /ingredients/scale``.

    An explicit ``factor`` takes precedence over the serving counts.
    """

    ingredients: list[str] = Field(..., description="Ingredient lines")
    factor: float | None = Field(default=None, gt=0, description="Scale factor")

    @field_validator("factor")
    @classmethod
    def _finite_factor(cls, v: float | None) -> float | None:
        if v is not None and not math.isfinite(v):
            msg = "factor must be a finite number"
            raise ValueError(msg)
        return v


class ScaledIngredient(APIResponse):
    """One ingredient line before and after scaling."""

    original: str
    scaled: str


class ScaleIngredientsResponse(APIResponse):
    """Scaled ingredient lines, in request order."""

    factor: float
    ingredients: list[ScaledIngredient]


# =============================================================================
# Reconciliation
# =============================================================================


class ReconcileIngredientsRequest(_ServingsMixin):
    """Body of ``POST /ingredients/reconcile``."""

    ingredients: list[str] = Field(..., description="Stored ingredient lines")
    shopping_items: list[ShoppingCandidate] = Field(default_factory=list)
    inventory_items: list[InventoryCandidate] = Field(default_factory=list)


class IngredientReconciliation(APIResponse):
    """Shopping-list and pantry status of one recipe ingredient."""

    name: str = Field(..., description="Ingredient text as stored")
    display_name: str = Field(..., description="Ingredient text after scaling")
    shopping_matches: list[ShoppingCandidate] = Field(default_factory=list)
    inventory_matches: list[InventoryCandidate] = Field(default_factory=list)
    has_unchecked_shopping_match: bool = False
    has_checked_shopping_match: bool = False
    in_inventory: bool = False
    has_any_match: bool = False
    shopping_list_entry: str = Field(
        ..., description="Text to add to the shopping list for this ingredient"
    )


class ReconcileIngredientsResponse(APIResponse):
    """Reconciliation of every ingredient, in request order."""

    factor: float
    ingredients: list[IngredientReconciliation]


# =============================================================================
# Matching
# =============================================================================


class MatchRequest(APIRequest):
    """Body of ``POST /ingredients/match``."""

    ingredient_name: str
    candidate_name: str


class MatchResponse(APIResponse):
    """Outcome of comparing two names, with the words that were compared."""

    matched: bool
    ingredient_words: list[str]
    candidate_words: list[str]
