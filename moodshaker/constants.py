"""Project-wide constant values."""
from __future__ import annotations

ENGLISH = "en"

LANGUAGE_COOKIE_NAME = "moodshaker-language"

ONE_DAY_SECONDS = 60 * 60 * 24
ONE_YEAR_SECONDS = ONE_DAY_SECONDS * 365

# Media requests bypass language routing entirely.
STATIC_FILE_EXTENSIONS: tuple[str, ...] = (".png", ".jpg", ".jpeg", ".gif", ".svg", ".ico", ".webp", ".avif")

# Platform paths the host matcher never hands to the gateway.
GATEWAY_EXEMPT_PATHS: tuple[str, ...] = ("/api", "/_next/static", "/_next/image", "/favicon.ico", "/health")

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "zh": "中文",
    "cn": "中文",
}

__all__ = [
    "ENGLISH",
    "GATEWAY_EXEMPT_PATHS",
    "LANGUAGE_COOKIE_NAME",
    "LANGUAGE_NAMES",
    "ONE_DAY_SECONDS",
    "ONE_YEAR_SECONDS",
    "STATIC_FILE_EXTENSIONS",
]
