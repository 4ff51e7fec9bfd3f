"""Pydantic schemas for cocktail records carrying optional English translations."""
from __future__ import annotations

from pydantic import BaseModel, Field


class Ingredient(BaseModel):
    name: str
    english_name: str | None = None
    amount: str
    english_amount: str | None = None
    unit: str | None = None
    english_unit: str | None = None
    substitute: str | None = None
    english_substitute: str | None = None


class Tool(BaseModel):
    name: str
    english_name: str | None = None
    alternative: str | None = None
    english_alternative: str | None = None


class Step(BaseModel):
    step_number: int
    description: str
    english_description: str | None = None
    tips: str | None = None
    english_tips: str | None = None


class Cocktail(BaseModel):
    """A recipe as stored, default-language fields first, English counterparts optional."""

    id: str | int | None = None
    name: str
    english_name: str | None = None
    description: str
    english_description: str | None = None
    match_reason: str
    english_match_reason: str | None = None
    base_spirit: str
    english_base_spirit: str | None = None
    alcohol_level: str
    english_alcohol_level: str | None = None
    serving_glass: str
    english_serving_glass: str | None = None
    time_required: str | None = None
    english_time_required: str | None = None
    flavor_profiles: list[str] = Field(default_factory=list)
    english_flavor_profiles: list[str] | None = None
    ingredients: list[Ingredient] = Field(default_factory=list)
    tools: list[Tool] = Field(default_factory=list)
    steps: list[Step] = Field(default_factory=list)
    image: str | None = None
    thumbnail: str | None = None


class StepContent(BaseModel):
    step_number: int
    description: str
    tips: str | None = None


class LocalizedIngredient(BaseModel):
    name: str
    amount: str
    unit: str = ""
    substitute: str | None = None


class LocalizedTool(BaseModel):
    name: str
    alternative: str | None = None


class LocalizedCocktail(BaseModel):
    """A cocktail with every translatable field resolved for one language."""

    id: str | int | None = None
    language: str
    name: str
    description: str
    match_reason: str
    base_spirit: str
    alcohol_level: str
    serving_glass: str
    time_required: str | None = None
    flavor_profiles: list[str] = Field(default_factory=list)
    ingredients: list[LocalizedIngredient] = Field(default_factory=list)
    tools: list[LocalizedTool] = Field(default_factory=list)
    steps: list[StepContent] = Field(default_factory=list)
    image: str | None = None
    thumbnail: str | None = None


__all__ = [
    "Cocktail",
    "Ingredient",
    "LocalizedCocktail",
    "LocalizedIngredient",
    "LocalizedTool",
    "Step",
    "StepContent",
    "Tool",
]
