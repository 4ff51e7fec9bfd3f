"""Language selector routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..config import Settings, get_settings
from ..schemas import LanguageOption, LanguagesResponse
from ..services.language_paths import alternate_paths, language_name
from ..services.locale_gateway import path_language

router = APIRouter(prefix="/api/languages", tags=["languages"])


@router.get("", response_model=LanguagesResponse)
def list_languages(
    path: str = Query("/", description="Page path to build alternate-language links for"),
    settings: Settings = Depends(get_settings),
) -> LanguagesResponse:
    config = settings.gateway_config()
    links = alternate_paths(path, config.languages)
    return LanguagesResponse(
        current=path_language(path, config.languages) or config.default_language,
        default=config.default_language,
        languages=[
            LanguageOption(code=code, name=language_name(code), path=links[code])
            for code in config.languages
        ],
    )


__all__ = ["router"]
