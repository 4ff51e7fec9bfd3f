"""Convenience exports for schema layer."""
from .cocktails import (
    Cocktail,
    Ingredient,
    LocalizedCocktail,
    LocalizedIngredient,
    LocalizedTool,
    Step,
    StepContent,
    Tool,
)
from .languages import LanguageOption, LanguagesResponse

__all__ = [
    "Cocktail",
    "Ingredient",
    "LanguageOption",
    "LanguagesResponse",
    "LocalizedCocktail",
    "LocalizedIngredient",
    "LocalizedTool",
    "Step",
    "StepContent",
    "Tool",
]
