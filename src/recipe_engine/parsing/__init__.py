"""Text parsing primitives for recipe data."""

from recipe_engine.parsing.quantity import (
    FRACTION_GLYPHS,
    format_quantity,
    parse_duration_minutes,
    parse_leading_quantity,
    parse_quantity_token,
)


__all__ = [
    "FRACTION_GLYPHS",
    "format_quantity",
    "parse_duration_minutes",
    "parse_leading_quantity",
    "parse_quantity_token",
]
