"""JSON-LD recipe extractor.

Finds schema.org/Recipe structured data embedded in an HTML page and
normalizes it into a ``CanonicalRecipeDraft``.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

from recipe_engine.observability.logging import get_logger
from recipe_engine.parsing.quantity import parse_duration_minutes
from recipe_engine.services.scraping.coercion import (
    has_type,
    strip_html,
    to_first_url,
    to_single_string,
    to_string_list,
)
from recipe_engine.services.scraping.models import (
    CanonicalRecipeDraft,
    DraftIngredient,
    DraftStep,
)


if TYPE_CHECKING:
    from collections.abc import Iterator


logger = get_logger(__name__)

_JSONLD_RE = re.compile(
    r'<script[^>]*type=["\']application/ld\+json["\'][^>]*>(.*?)</script>',
    re.DOTALL | re.IGNORECASE,
)
_DIGITS_RE = re.compile(r"\d+", re.ASCII)

RECIPE_TYPE = "Recipe"
STEP_TYPE = "HowToStep"
SECTION_TYPE = "HowToSection"


def extract_recipe_from_jsonld(html: str, source_url: str) -> CanonicalRecipeDraft | None:
    """Extract the first schema.org Recipe from the page's JSON-LD.

    Blocks are searched in document order and items within a block in
    array order; the first Recipe wins. Blocks that are not valid JSON are
    skipped.

    Args:
        html: Page markup.
        source_url: URL the page was fetched from.

    Returns:
        The normalized draft, or None if the page has no Recipe data.
    """
    for index, block in enumerate(iter_jsonld_blocks(html)):
        recipe = _find_recipe(block)
        if recipe is not None:
            logger.debug("Found Recipe in JSON-LD block", url=source_url, block=index)
            return normalize_recipe(recipe, source_url)

    return None


def iter_jsonld_blocks(html: str) -> Iterator[Any]:
    """Yield every JSON-LD block that parses as JSON, in document order."""
    for match in _JSONLD_RE.finditer(html):
        try:
            yield json.loads(match.group(1).strip())
        except (json.JSONDecodeError, RecursionError) as e:
            logger.debug("Skipping malformed JSON-LD block", error=str(e))


def _candidate_items(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("@graph"), list):
        return data["@graph"]
    return [data]


def _find_recipe(data: Any) -> dict[str, Any] | None:
    for item in _candidate_items(data):
        if has_type(item, RECIPE_TYPE):
            return item
    return None


def normalize_recipe(data: dict[str, Any], source_url: str) -> CanonicalRecipeDraft:
    """Map a schema.org Recipe object onto the canonical draft."""
    description = to_single_string(data.get("description"))

    return CanonicalRecipeDraft(
        title=to_single_string(data.get("name")) or "",
        description=(strip_html(description) or None) if description else None,
        servings=_parse_servings(data.get("recipeYield")),
        prep_time_minutes=parse_duration_minutes(data.get("prepTime")),
        cook_time_minutes=parse_duration_minutes(data.get("cookTime")),
        image_url=to_first_url(data.get("image")),
        source_url=source_url,
        tags=to_string_list(data.get("recipeCategory"))
        + to_string_list(data.get("recipeCuisine")),
        ingredients=_parse_ingredients(data.get("recipeIngredient")),
        steps=_parse_steps(data.get("recipeInstructions")),
    )


def _parse_servings(value: Any) -> int | None:
    """Take the first run of digits in ``recipeYield`` ("4-6 servings" -> 4)."""
    text = to_single_string(value)
    if text is None:
        return None
    match = _DIGITS_RE.search(text)
    if match is None:
        return None
    servings = int(match.group())
    return servings if servings > 0 else None


def _parse_ingredients(value: Any) -> list[DraftIngredient]:
    return [
        DraftIngredient(name=name, order_index=index)
        for index, name in enumerate(to_string_list(value))
    ]


def _step_text(item: Any) -> str:
    """Text of a HowToStep-like entry.

    ``name`` is used only when ``text`` is missing or null; an empty ``text``
    yields no step.
    """
    if isinstance(item, str):
        return strip_html(item)
    if not isinstance(item, dict):
        return ""
    raw = item.get("text")
    if raw is None:
        raw = item.get("name")
    text = to_single_string(raw)
    return strip_html(text) if text else ""


def _instruction_texts(instructions: Any) -> Iterator[str]:
    """Yield raw step texts from every supported ``recipeInstructions`` shape."""
    if isinstance(instructions, str):
        # A single block of text, one step per line.
        yield from instructions.splitlines()
        return
    if isinstance(instructions, dict):
        instructions = [instructions]
    if not isinstance(instructions, list):
        return

    for item in instructions:
        if isinstance(item, str):
            yield item
        elif has_type(item, SECTION_TYPE):
            sub_items = item.get("itemListElement") or []
            if isinstance(sub_items, (dict, str)):
                sub_items = [sub_items]
            if not isinstance(sub_items, list):
                continue
            for sub_item in sub_items:
                yield _step_text(sub_item)
        elif has_type(item, STEP_TYPE):
            yield _step_text(item)


def _parse_steps(instructions: Any) -> list[DraftStep]:
    steps: list[DraftStep] = []
    for text in _instruction_texts(instructions):
        text = text.strip()
        if text:
            steps.append(DraftStep(step_number=len(steps) + 1, instruction=text))
    return steps
