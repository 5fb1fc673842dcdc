"""Fuzzy matching of ingredient names against shopping and pantry items.

Names are reduced to their significant words (lowercase letters only, stop
words and short tokens removed). Two names match when any word of one
contains any word of the other, so "eggs" matches "egg" and "flour" matches
"allpurpose flour". There is no stemming or edit distance; a few false
positives are accepted in exchange.
"""

from __future__ import annotations

import re

from recipe_engine.services.reconciliation.constants import MIN_WORD_LENGTH, STOP_WORDS


_NON_LETTER_RE = re.compile(r"[^a-z\s]")


def significant_words(text: str) -> frozenset[str]:
    """Reduce ``text`` to the set of words worth comparing.

    Example:
        >>> sorted(significant_words("2 cups all-purpose flour"))
        ['allpurpose', 'flour']
    """
    letters_only = _NON_LETTER_RE.sub("", text.lower())
    return frozenset(
        word
        for word in letters_only.split()
        if len(word) > MIN_WORD_LENGTH and word not in STOP_WORDS
    )


def words_overlap(left: frozenset[str], right: frozenset[str]) -> bool:
    """Whether some word in ``left`` and some word in ``right`` contain one another."""
    if not left or not right:
        return False
    return any(a in b or b in a for a in left for b in right)


def fuzzy_match(ingredient_name: str, candidate_name: str) -> bool:
    """Decide whether a shopping or pantry item covers an ingredient.

    Names with no significant words never match anything.
    """
    return words_overlap(
        significant_words(ingredient_name),
        significant_words(candidate_name),
    )
