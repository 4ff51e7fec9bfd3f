"""Per-request language negotiation for language-prefixed site routes.

Every page lives under a language segment (``/en/...``). Requests without one
are redirected to the visitor's preferred language and the choice is persisted
in a cookie. Decisions are computed from a request descriptor and a static
configuration only; translating a decision into an HTTP response is left to the
caller (see ``moodshaker.middleware.locale_gateway``).
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Literal, Union

from ..constants import (
    LANGUAGE_COOKIE_NAME,
    ONE_DAY_SECONDS,
    ONE_YEAR_SECONDS,
    STATIC_FILE_EXTENSIONS,
)

logger = logging.getLogger(__name__)

MAX_LANGUAGES = 2


@dataclass(frozen=True)
class GatewayConfig:
    """Deployment-time locale routing settings."""

    languages: tuple[str, ...]
    default_language: str
    cookie_name: str = LANGUAGE_COOKIE_NAME
    cookie_max_age: int = ONE_YEAR_SECONDS
    client_hint_header: str | None = None
    static_extensions: tuple[str, ...] = STATIC_FILE_EXTENSIONS

    def __post_init__(self) -> None:
        if not self.languages:
            raise ValueError("At least one supported language is required")
        if len(self.languages) > MAX_LANGUAGES:
            raise ValueError(f"At most {MAX_LANGUAGES} languages are supported per deployment")
        if len(set(self.languages)) != len(self.languages):
            raise ValueError("Supported languages must be unique")
        if any(not tag or "/" in tag for tag in self.languages):
            raise ValueError("Language tags must be non-empty path segments")
        if self.default_language not in self.languages:
            raise ValueError(f"Default language {self.default_language!r} is not in {self.languages!r}")
        if not self.cookie_name:
            raise ValueError("Cookie name cannot be empty")
        if self.cookie_max_age <= 0:
            raise ValueError("Cookie max-age must be positive")


ENGLISH_FIRST = GatewayConfig(languages=("en", "zh"), default_language="en", cookie_max_age=ONE_YEAR_SECONDS)
CHINESE_FIRST = GatewayConfig(languages=("en", "cn"), default_language="cn", cookie_max_age=ONE_DAY_SECONDS)

PROFILES: dict[str, GatewayConfig] = {
    "english_first": ENGLISH_FIRST,
    "chinese_first": CHINESE_FIRST,
}


@dataclass(frozen=True)
class RequestDescriptor:
    """The parts of an inbound request the gateway looks at."""

    path: str
    cookies: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


@dataclass(frozen=True)
class PreferenceCookie:
    name: str
    value: str
    max_age: int
    path: str = "/"


@dataclass(frozen=True)
class PassThrough:
    reason: Literal["static_asset", "language_prefixed"]


@dataclass(frozen=True)
class Redirect:
    language: str
    path: str
    cookie: PreferenceCookie


LocaleDecision = Union[PassThrough, Redirect]


def is_static_asset(path: str, extensions: Iterable[str] = STATIC_FILE_EXTENSIONS) -> bool:
    """Return True when the path ends with a media extension (case-sensitive)."""

    return any(path.endswith(ext) for ext in extensions)


def path_language(path: str, languages: Sequence[str]) -> str | None:
    """Return the language segment the path starts with, if any."""

    for language in languages:
        prefix = f"/{language}"
        if path == prefix or path.startswith(prefix + "/"):
            return language
    return None


def parse_accept_language(header: str | None) -> list[str]:
    """Split an Accept-Language value into tags, keeping the listed order.

    Quality suffixes are dropped and do not reorder entries.
    """

    if not header:
        return []
    tags: list[str] = []
    for segment in header.split(","):
        tag = segment.split(";", 1)[0].strip()
        if tag:
            tags.append(tag)
    return tags


def match_supported_language(tags: Iterable[str], languages: Sequence[str]) -> str | None:
    """Map the first tag starting with a supported language onto that language."""

    for tag in tags:
        for language in languages:
            if tag.startswith(language):
                return language
    return None


def _supported(value: str | None, languages: Sequence[str]) -> str | None:
    if value is None:
        return None
    candidate = value.strip()
    return candidate if candidate in languages else None


def resolve_language(request: RequestDescriptor, config: GatewayConfig) -> str:
    """Pick a language from cookie, client hint, Accept-Language, then default."""

    language = _supported(request.cookies.get(config.cookie_name), config.languages)
    if language:
        return language

    if config.client_hint_header:
        language = _supported(request.header(config.client_hint_header), config.languages)
        if language:
            return language

    language = match_supported_language(parse_accept_language(request.header("accept-language")), config.languages)
    if language:
        return language

    return config.default_language


def build_redirect_path(language: str, path: str) -> str:
    if path in ("", "/"):
        return f"/{language}"
    return f"/{language}{path}"


def preference_cookie(language: str, config: GatewayConfig) -> PreferenceCookie:
    return PreferenceCookie(name=config.cookie_name, value=language, max_age=config.cookie_max_age)


def decide(request: RequestDescriptor, config: GatewayConfig) -> LocaleDecision:
    """Decide whether a request passes through or is redirected to a language path."""

    path = request.path
    if is_static_asset(path, config.static_extensions):
        return PassThrough(reason="static_asset")

    if path_language(path, config.languages) is not None:
        return PassThrough(reason="language_prefixed")

    language = resolve_language(request, config)
    target = build_redirect_path(language, path)
    logger.debug("Redirecting %s to %s (language=%s)", path, target, language)
    return Redirect(language=language, path=target, cookie=preference_cookie(language, config))


__all__ = [
    "CHINESE_FIRST",
    "ENGLISH_FIRST",
    "GatewayConfig",
    "LocaleDecision",
    "PROFILES",
    "PassThrough",
    "PreferenceCookie",
    "Redirect",
    "RequestDescriptor",
    "build_redirect_path",
    "decide",
    "is_static_asset",
    "match_supported_language",
    "parse_accept_language",
    "path_language",
    "preference_cookie",
    "resolve_language",
]
