"""Integration tests for the ingredient endpoints.

Tests cover:
- Scaling by serving counts and by explicit factor
- Reconciliation against shopping list and inventory
- Single name comparison
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from httpx import AsyncClient


pytestmark = pytest.mark.integration


class TestScaleIngredients:
    """Tests for POST /ingredients/scale."""

    async def test_scales_by_serving_counts(
        self, client: AsyncClient, api_prefix: str
    ) -> None:
        """Should derive the factor from target over original servings."""
        response = await client.post(
            f"{api_prefix}/ingredients/scale",
            json={
                "ingredients": ["1/2 tsp salt", "1 1/2 cups milk", "Salt to taste"],
                "originalServings": 4,
                "targetServings": 8,
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "factor": 2.0,
            "ingredients": [
                {"original": "1/2 tsp salt", "scaled": "1 tsp salt"},
                {"original": "1 1/2 cups milk", "scaled": "3 cups milk"},
                {"original": "Salt to taste", "scaled": "Salt to taste"},
            ],
        }

    async def test_explicit_factor_wins(
        self, client: AsyncClient, api_prefix: str
    ) -> None:
        """Should prefer the explicit factor over serving counts."""
        response = await client.post(
            f"{api_prefix}/ingredients/scale",
            json={
                "ingredients": ["3 eggs"],
                "factor": 0.5,
                "originalServings": 4,
                "targetServings": 8,
            },
        )

        assert response.status_code == 200
        assert response.json()["factor"] == 0.5
        assert response.json()["ingredients"][0]["scaled"] == "1 ½ eggs"

    async def test_defaults_to_unscaled(
        self, client: AsyncClient, api_prefix: str
    ) -> None:
        """Should leave lines untouched without a factor or servings."""
        response = await client.post(
            f"{api_prefix}/ingredients/scale",
            json={"ingredients": ["2.50 cups flour"]},
        )

        assert response.status_code == 200
        assert response.json()["factor"] == 1.0
        assert response.json()["ingredients"][0]["scaled"] == "2.50 cups flour"

    @pytest.mark.parametrize(
        "body",
        [
            {"ingredients": ["1 egg"], "factor": 0},
            {"ingredients": ["1 egg"], "factor": -2},
            {"ingredients": ["1 egg"], "originalServings": 0, "targetServings": 2},
            {"factor": 2},
        ],
    )
    async def test_invalid_body_is_bad_request(
        self, client: AsyncClient, api_prefix: str, body: dict[str, object]
    ) -> None:
        """Should reject non-positive factors and servings."""
        response = await client.post(f"{api_prefix}/ingredients/scale", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestReconcileIngredients:
    """Tests for POST /ingredients/reconcile."""

    async def test_reports_matches(self, client: AsyncClient, api_prefix: str) -> None:
        """Should report shopping and pantry matches per ingredient."""
        response = await client.post(
            f"{api_prefix}/ingredients/reconcile",
            json={
                "ingredients": ["2 cups all-purpose flour", "1 tsp salt", "3 eggs"],
                "shoppingItems": [
                    {"name": "Flour", "isChecked": False},
                    {"name": "Eggs", "isChecked": True},
                ],
                "inventoryItems": [{"name": "Sea salt", "quantity": 2}],
                "originalServings": 2,
                "targetServings": 4,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["factor"] == 2.0

        flour, salt, eggs = data["ingredients"]
        assert flour == {
            "name": "2 cups all-purpose flour",
            "displayName": "4 cups all-purpose flour",
            "shoppingMatches": [{"name": "Flour", "isChecked": False}],
            "inventoryMatches": [],
            "hasUncheckedShoppingMatch": True,
            "hasCheckedShoppingMatch": False,
            "inInventory": False,
            "hasAnyMatch": True,
            "shoppingListEntry": "4 cups all-purpose flour",
        }
        assert salt["inventoryMatches"] == [{"name": "Sea salt", "quantity": 2.0}]
        assert salt["inInventory"] is True
        assert eggs["hasCheckedShoppingMatch"] is True
        assert eggs["hasUncheckedShoppingMatch"] is False

    async def test_accepts_snake_case_fields(
        self, client: AsyncClient, api_prefix: str
    ) -> None:
        """Should accept snake_case as well as camelCase field names."""
        response = await client.post(
            f"{api_prefix}/ingredients/reconcile",
            json={
                "ingredients": ["1 onion"],
                "shopping_items": [{"name": "red onions", "is_checked": True}],
            },
        )

        assert response.status_code == 200
        (row,) = response.json()["ingredients"]
        assert row["hasCheckedShoppingMatch"] is True

    async def test_empty_ingredients(self, client: AsyncClient, api_prefix: str) -> None:
        """Should return an empty report for no ingredients."""
        response = await client.post(
            f"{api_prefix}/ingredients/reconcile", json={"ingredients": []}
        )

        assert response.status_code == 200
        assert response.json() == {"factor": 1.0, "ingredients": []}


class TestMatchNames:
    """Tests for POST /ingredients/match."""

    async def test_match(self, client: AsyncClient, api_prefix: str) -> None:
        """Should show the compared words and the outcome."""
        response = await client.post(
            f"{api_prefix}/ingredients/match",
            json={"ingredientName": "2 cups all-purpose flour", "candidateName": "Flour"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "matched": True,
            "ingredientWords": ["allpurpose", "flour"],
            "candidateWords": ["flour"],
        }

    async def test_no_match(self, client: AsyncClient, api_prefix: str) -> None:
        """Should not match unrelated names."""
        response = await client.post(
            f"{api_prefix}/ingredients/match",
            json={"ingredientName": "salt", "candidateName": "black pepper"},
        )

        assert response.json()["matched"] is False

    async def test_empty_names_never_match(
        self, client: AsyncClient, api_prefix: str
    ) -> None:
        """Should not match names without significant words."""
        response = await client.post(
            f"{api_prefix}/ingredients/match",
            json={"ingredientName": "a", "candidateName": ""},
        )

        assert response.json() == {
            "matched": False,
            "ingredientWords": [],
            "candidateWords": [],
        }
