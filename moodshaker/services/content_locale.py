"""Pick the language-appropriate value for each translatable cocktail field.

Records store the default-language text in ``<field>`` and an optional English
translation in ``english_<field>``. Only the exact English tag selects the
translation, and an empty translation never blanks out the default value.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import overload

from ..constants import ENGLISH
from ..schemas.cocktails import (
    Cocktail,
    Ingredient,
    LocalizedCocktail,
    LocalizedIngredient,
    LocalizedTool,
    Step,
    StepContent,
    Tool,
)


class CocktailField(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"
    MATCH_REASON = "match_reason"
    BASE_SPIRIT = "base_spirit"
    ALCOHOL_LEVEL = "alcohol_level"
    SERVING_GLASS = "serving_glass"
    TIME_REQUIRED = "time_required"


_COCKTAIL_FIELDS: dict[CocktailField, Callable[[Cocktail], tuple[str | None, str | None]]] = {
    CocktailField.NAME: lambda c: (c.name, c.english_name),
    CocktailField.DESCRIPTION: lambda c: (c.description, c.english_description),
    CocktailField.MATCH_REASON: lambda c: (c.match_reason, c.english_match_reason),
    CocktailField.BASE_SPIRIT: lambda c: (c.base_spirit, c.english_base_spirit),
    CocktailField.ALCOHOL_LEVEL: lambda c: (c.alcohol_level, c.english_alcohol_level),
    CocktailField.SERVING_GLASS: lambda c: (c.serving_glass, c.english_serving_glass),
    CocktailField.TIME_REQUIRED: lambda c: (c.time_required, c.english_time_required),
}


def wants_english(language: str | None) -> bool:
    return language == ENGLISH


@overload
def resolve_scalar(language: str | None, default_value: str, english_value: str | None) -> str: ...


@overload
def resolve_scalar(language: str | None, default_value: None, english_value: str | None) -> str | None: ...


def resolve_scalar(language, default_value, english_value):
    """Return the English value for the English tag when it is non-empty, else the default."""

    if wants_english(language) and english_value:
        return english_value
    return default_value


def resolve_list(language: str | None, default_values: Sequence[str], english_values: Sequence[str] | None) -> list[str]:
    """Choose a whole list; the two variants are never merged."""

    if wants_english(language) and english_values:
        return list(english_values)
    return list(default_values)


def cocktail_text(language: str | None, cocktail: Cocktail | None, field: CocktailField) -> str | None:
    if cocktail is None:
        return None
    default_value, english_value = _COCKTAIL_FIELDS[field](cocktail)
    return resolve_scalar(language, default_value, english_value)


def flavor_profiles(language: str | None, cocktail: Cocktail | None) -> list[str] | None:
    if cocktail is None:
        return None
    return resolve_list(language, cocktail.flavor_profiles, cocktail.english_flavor_profiles)


def ingredient_name(language: str | None, ingredient: Ingredient) -> str:
    return resolve_scalar(language, ingredient.name, ingredient.english_name)


def ingredient_amount(language: str | None, ingredient: Ingredient) -> str:
    return resolve_scalar(language, ingredient.amount, ingredient.english_amount)


def ingredient_unit(language: str | None, ingredient: Ingredient) -> str:
    return resolve_scalar(language, ingredient.unit, ingredient.english_unit) or ""


def ingredient_substitute(language: str | None, ingredient: Ingredient) -> str | None:
    return resolve_scalar(language, ingredient.substitute, ingredient.english_substitute)


def tool_name(language: str | None, tool: Tool) -> str:
    return resolve_scalar(language, tool.name, tool.english_name)


def tool_alternative(language: str | None, tool: Tool) -> str | None:
    return resolve_scalar(language, tool.alternative, tool.english_alternative)


def step_content(language: str | None, step: Step) -> StepContent:
    """Resolve a step's description and tips together, each independently."""

    return StepContent(
        step_number=step.step_number,
        description=resolve_scalar(language, step.description, step.english_description),
        tips=resolve_scalar(language, step.tips, step.english_tips),
    )


def localize_cocktail(language: str | None, cocktail: Cocktail) -> LocalizedCocktail:
    def text(field: CocktailField) -> str | None:
        return cocktail_text(language, cocktail, field)

    return LocalizedCocktail(
        id=cocktail.id,
        language=language or "",
        name=text(CocktailField.NAME),
        description=text(CocktailField.DESCRIPTION),
        match_reason=text(CocktailField.MATCH_REASON),
        base_spirit=text(CocktailField.BASE_SPIRIT),
        alcohol_level=text(CocktailField.ALCOHOL_LEVEL),
        serving_glass=text(CocktailField.SERVING_GLASS),
        time_required=text(CocktailField.TIME_REQUIRED),
        flavor_profiles=flavor_profiles(language, cocktail) or [],
        ingredients=[
            LocalizedIngredient(
                name=ingredient_name(language, item),
                amount=ingredient_amount(language, item),
                unit=ingredient_unit(language, item),
                substitute=ingredient_substitute(language, item),
            )
            for item in cocktail.ingredients
        ],
        tools=[
            LocalizedTool(name=tool_name(language, item), alternative=tool_alternative(language, item))
            for item in cocktail.tools
        ],
        steps=[step_content(language, item) for item in cocktail.steps],
        image=cocktail.image,
        thumbnail=cocktail.thumbnail,
    )


__all__ = [
    "CocktailField",
    "cocktail_text",
    "flavor_profiles",
    "ingredient_amount",
    "ingredient_name",
    "ingredient_substitute",
    "ingredient_unit",
    "localize_cocktail",
    "resolve_list",
    "resolve_scalar",
    "step_content",
    "tool_alternative",
    "tool_name",
    "wants_english",
]
