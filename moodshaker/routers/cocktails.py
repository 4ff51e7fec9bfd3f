"""Routes exposing localized views of cocktail records."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..config import Settings, get_settings
from ..schemas import Cocktail, LocalizedCocktail
from ..services.content_locale import localize_cocktail

router = APIRouter(prefix="/api/cocktails", tags=["cocktails"])


@router.post("/localize", response_model=LocalizedCocktail)
def localize(
    cocktail: Cocktail,
    language: str | None = Query(None, description="Target language tag; defaults to the site default"),
    settings: Settings = Depends(get_settings),
) -> LocalizedCocktail:
    target = language or settings.gateway_config().default_language
    return localize_cocktail(target, cocktail)


__all__ = ["router"]
