"""Canonical recipe draft produced by an import.

The draft is serialized with snake_case keys, which is the shape the
storage layer expects, so these models use plain ``BaseModel`` rather than
the camelCase API schema bases.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class DraftIngredient(BaseModel):
    """One ingredient line of an imported recipe."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Ingredient text as written")
    order_index: int = Field(..., ge=0, description="Zero-based position")


class DraftStep(BaseModel):
    """One instruction step of an imported recipe."""

    model_config = ConfigDict(frozen=True)

    step_number: int = Field(..., ge=1, description="One-based step number")
    instruction: str = Field(..., min_length=1, description="Plain-text instruction")


class CanonicalRecipeDraft(BaseModel):
    """Normalized recipe ready for the user to review and save.

    ``ingredients`` are numbered from 0 and ``steps`` from 1, both without
    gaps. Entries whose text is empty are never present.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field("", description="Recipe title")
    description: str | None = Field(None, description="Description without markup")
    servings: int | None = Field(None, gt=0, description="Number of servings")
    prep_time_minutes: int | None = Field(None, ge=0, description="Prep time")
    cook_time_minutes: int | None = Field(None, ge=0, description="Cook time")
    image_url: str | None = Field(None, description="Main recipe image URL")
    source_url: str = Field(..., description="URL the recipe was imported from")
    tags: list[str] = Field(
        default_factory=list, description="Categories followed by cuisines"
    )
    ingredients: list[DraftIngredient] = Field(default_factory=list)
    steps: list[DraftStep] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_time_minutes(self) -> int | None:
        """Prep plus cook time, or None when neither is known."""
        if self.prep_time_minutes is None and self.cook_time_minutes is None:
            return None
        return (self.prep_time_minutes or 0) + (self.cook_time_minutes or 0)
