"""Ingredient reconciliation service.

Cross-references a recipe's ingredients with the user's shopping list and
pantry inventory, and scales each line for display at the chosen serving
count. Matching always uses the stored ingredient text; only the display
text is scaled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_engine.observability.logging import get_logger
from recipe_engine.schemas.reconciliation import (
    IngredientReconciliation,
    ScaledIngredient,
)
from recipe_engine.services.reconciliation.matching import (
    significant_words,
    words_overlap,
)
from recipe_engine.services.reconciliation.scaling import (
    scale_ingredient_line,
    serving_scale_factor,
)


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipe_engine.schemas.reconciliation import (
        InventoryCandidate,
        ShoppingCandidate,
    )


logger = get_logger(__name__)


class IngredientReconciliationService:
    """Scale ingredient lines and match them against shopping and pantry items.

    The service is stateless; one instance is shared by all requests.

    Example:
        ```python
        service = IngredientReconciliationService()
        rows = service.reconcile(
            ["2 cups flour", "1 tsp salt"],
            shopping_items=[ShoppingCandidate(name="Flour")],
            inventory_items=[InventoryCandidate(name="sea salt", quantity=1)],
            factor=service.resolve_factor(original_servings=4, target_servings=8),
        )
        rows[0].display_name  # "4 cups flour"
        ```
    """

    def resolve_factor(
        self,
        *,
        factor: float | None = None,
        original_servings: int | None = None,
        target_servings: int | None = None,
    ) -> float:
        """Pick the scale factor: an explicit one, else the serving ratio."""
        if factor is not None:
            return factor
        return serving_scale_factor(original_servings, target_servings)

    def scale(
        self,
        ingredients: Sequence[str],
        factor: float,
    ) -> list[ScaledIngredient]:
        """Scale every ingredient line by ``factor``."""
        return [
            ScaledIngredient(original=line, scaled=scale_ingredient_line(line, factor))
            for line in ingredients
        ]

    def reconcile(
        self,
        ingredients: Sequence[str],
        *,
        shopping_items: Sequence[ShoppingCandidate] = (),
        inventory_items: Sequence[InventoryCandidate] = (),
        factor: float = 1.0,
    ) -> list[IngredientReconciliation]:
        """Build the match report for each ingredient, in input order.

        Args:
            ingredients: Stored ingredient lines of the recipe.
            shopping_items: Current shopping list entries, checked or not.
            inventory_items: Current pantry entries.
            factor: Serving scale factor applied to the display text.

        Returns:
            One ``IngredientReconciliation`` per ingredient.
        """
        # Word sets for the candidates are reused across every ingredient.
        shopping_words = [significant_words(item.name) for item in shopping_items]
        inventory_words = [significant_words(item.name) for item in inventory_items]

        results: list[IngredientReconciliation] = []
        for name in ingredients:
            words = significant_words(name)
            shopping_matches = [
                item
                for item, item_words in zip(shopping_items, shopping_words, strict=True)
                if words_overlap(words, item_words)
            ]
            inventory_matches = [
                item
                for item, item_words in zip(inventory_items, inventory_words, strict=True)
                if words_overlap(words, item_words)
            ]
            display_name = scale_ingredient_line(name, factor)

            results.append(
                IngredientReconciliation(
                    name=name,
                    display_name=display_name,
                    shopping_matches=shopping_matches,
                    inventory_matches=inventory_matches,
                    has_unchecked_shopping_match=any(
                        not item.is_checked for item in shopping_matches
                    ),
                    has_checked_shopping_match=any(
                        item.is_checked for item in shopping_matches
                    ),
                    in_inventory=bool(inventory_matches),
                    has_any_match=bool(shopping_matches or inventory_matches),
                    shopping_list_entry=display_name,
                )
            )

        logger.debug(
            "Reconciled ingredients",
            ingredients=len(results),
            shopping_items=len(shopping_items),
            inventory_items=len(inventory_items),
            matched=sum(1 for r in results if r.has_any_match),
        )
        return results
