"""Ingredient matching, scaling and shopping/pantry reconciliation."""

from recipe_engine.services.reconciliation.matching import (
    fuzzy_match,
    significant_words,
)
from recipe_engine.services.reconciliation.scaling import (
    scale_ingredient_line,
    serving_scale_factor,
)
from recipe_engine.services.reconciliation.service import (
    IngredientReconciliationService,
)


__all__ = [
    "IngredientReconciliationService",
    "fuzzy_match",
    "scale_ingredient_line",
    "serving_scale_factor",
    "significant_words",
]
