"""Convenience exports for service layer."""
from .content_locale import (
    CocktailField,
    cocktail_text,
    flavor_profiles,
    ingredient_amount,
    ingredient_name,
    ingredient_substitute,
    ingredient_unit,
    localize_cocktail,
    resolve_list,
    resolve_scalar,
    step_content,
    tool_alternative,
    tool_name,
)
from .language_paths import alternate_paths, language_name, strip_language_prefix, with_language_prefix
from .locale_gateway import (
    CHINESE_FIRST,
    ENGLISH_FIRST,
    GatewayConfig,
    LocaleDecision,
    PassThrough,
    PreferenceCookie,
    Redirect,
    RequestDescriptor,
    decide,
)

__all__ = [
    "CHINESE_FIRST",
    "CocktailField",
    "ENGLISH_FIRST",
    "GatewayConfig",
    "LocaleDecision",
    "PassThrough",
    "PreferenceCookie",
    "Redirect",
    "RequestDescriptor",
    "alternate_paths",
    "cocktail_text",
    "decide",
    "flavor_profiles",
    "ingredient_amount",
    "ingredient_name",
    "ingredient_substitute",
    "ingredient_unit",
    "language_name",
    "localize_cocktail",
    "resolve_list",
    "resolve_scalar",
    "step_content",
    "strip_language_prefix",
    "tool_alternative",
    "tool_name",
    "with_language_prefix",
]
