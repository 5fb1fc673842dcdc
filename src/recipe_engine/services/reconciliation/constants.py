"""Constants for ingredient matching and scaling.

Contains:
- Stop words removed before comparing ingredient names
- Tolerance for treating a scale factor as 1
"""

from __future__ import annotations

from typing import Final


# =============================================================================
# Matching
# =============================================================================
# Units, size/quantity adjectives, preparation adjectives and conjunctions.
# Whatever remains after removing these is the ingredient noun.

STOP_WORDS: Final[frozenset[str]] = frozenset(
    {
        # units and containers
        "cup", "cups", "tsp", "tbsp", "tablespoon", "tablespoons",
        "teaspoon", "teaspoons", "pound", "pounds", "ounce", "ounces",
        "gram", "grams", "kilogram", "liter", "liters",
        "can", "jar", "bag", "bunch", "pinch", "handful",
        "clove", "cloves", "slice", "slices",
        # size and quantity
        "large", "small", "medium", "fresh", "dried", "frozen", "whole", "half",
        # preparation
        "minced", "diced", "chopped", "sliced", "grated", "ground", "crushed",
        "peeled",
        # conjunctions and fillers
        "and", "the", "for", "with",
    }
)  # fmt: skip

# Words must be longer than this to count.
MIN_WORD_LENGTH: Final[int] = 2


# =============================================================================
# Scaling
# =============================================================================

UNITY_TOLERANCE: Final[float] = 0.001
