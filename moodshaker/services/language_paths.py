"""Helpers for moving a page path between language segments."""
from __future__ import annotations

from collections.abc import Sequence

from ..constants import LANGUAGE_NAMES
from .locale_gateway import build_redirect_path, path_language


def strip_language_prefix(path: str, languages: Sequence[str]) -> str:
    """Drop a leading language segment: ``/en/about`` -> ``/about``, ``/en`` -> ``/``."""

    language = path_language(path, languages)
    if language is None:
        return path
    return path[len(language) + 1:] or "/"


def with_language_prefix(language: str, path: str, languages: Sequence[str]) -> str:
    """Re-home a path under ``language``, replacing any existing language segment."""

    return build_redirect_path(language, strip_language_prefix(path, languages))


def alternate_paths(path: str, languages: Sequence[str]) -> dict[str, str]:
    return {language: with_language_prefix(language, path, languages) for language in languages}


def language_name(language: str) -> str:
    return LANGUAGE_NAMES.get(language, language)


__all__ = [
    "alternate_paths",
    "language_name",
    "strip_language_prefix",
    "with_language_prefix",
]
