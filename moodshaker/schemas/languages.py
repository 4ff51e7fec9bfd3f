"""Schemas backing the language selector API."""
from __future__ import annotations

from pydantic import BaseModel


class LanguageOption(BaseModel):
    code: str
    name: str
    path: str


class LanguagesResponse(BaseModel):
    current: str
    default: str
    languages: list[LanguageOption]


__all__ = ["LanguageOption", "LanguagesResponse"]
