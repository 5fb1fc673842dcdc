"""Serving-size scaling of ingredient lines."""

from __future__ import annotations

import math

from recipe_engine.parsing.quantity import format_quantity, parse_leading_quantity
from recipe_engine.services.reconciliation.constants import UNITY_TOLERANCE


def serving_scale_factor(
    original_servings: int | None,
    target_servings: int | None,
) -> float:
    """Scale factor for showing a recipe at ``target_servings``.

    Returns 1.0 when either count is unknown or not positive, since there
    is nothing to scale from.
    """
    if not original_servings or not target_servings:
        return 1.0
    if original_servings <= 0 or target_servings <= 0:
        return 1.0
    return target_servings / original_servings


def scale_ingredient_line(name: str, factor: float) -> str:
    """Rewrite the leading quantity of ``name`` multiplied by ``factor``.

    The rest of the line is kept as written. Lines are returned unchanged
    when the factor is 1, when there is no leading quantity ("Salt to
    taste"), or when the quantity cannot be computed (``"1/0 cup"``).
    A quantity that scales to zero is dropped along with its separator.

    Example:
        >>> scale_ingredient_line("1/2 tsp salt", 2)
        '1 tsp salt'
    """
    if abs(factor - 1) < UNITY_TOLERANCE:
        return name

    parsed = parse_leading_quantity(name)
    if parsed is None:
        return name

    quantity, rest = parsed
    scaled = quantity * factor
    if not math.isfinite(scaled):
        return name

    formatted = format_quantity(scaled)
    if not formatted:
        return rest
    return f"{formatted} {rest}" if rest else formatted
