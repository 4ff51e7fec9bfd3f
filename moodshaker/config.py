"""
Runtime configuration helpers for the FastAPI application.

Loads locale routing settings from the environment and the .env file
located in the project root.
"""

from __future__ import annotations

from dataclasses import replace
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    GATEWAY_EXEMPT_PATHS,
    LANGUAGE_COOKIE_NAME,
    ONE_YEAR_SECONDS,
    STATIC_FILE_EXTENSIONS,
)
from .services.locale_gateway import PROFILES, GatewayConfig

# Resolve the project root
BASE_DIR = Path(__file__).resolve().parents[1]

# Absolute path to .env
ENV_PATH = BASE_DIR / ".env"

# Load .env defaults without overriding environment variables provided by the platform
load_dotenv(dotenv_path=ENV_PATH, override=False)


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


class Settings(BaseSettings):
    app_name: str = Field(default="MoodShaker", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Named deployment preset; overrides the language set, default and TTL below.
    locale_profile: str | None = Field(default=None, alias="LOCALE_PROFILE")

    locale_supported_languages: str = Field(default="en,zh", alias="LOCALE_SUPPORTED_LANGUAGES")
    locale_default_language: str = Field(default="en", alias="LOCALE_DEFAULT_LANGUAGE")
    locale_cookie_name: str = Field(default=LANGUAGE_COOKIE_NAME, alias="LOCALE_COOKIE_NAME")
    locale_cookie_max_age: int = Field(default=ONE_YEAR_SECONDS, alias="LOCALE_COOKIE_MAX_AGE")
    locale_client_hint_header: str | None = Field(default=None, alias="LOCALE_CLIENT_HINT_HEADER")
    locale_static_extensions: str = Field(default=",".join(STATIC_FILE_EXTENSIONS), alias="LOCALE_STATIC_EXTENSIONS")
    locale_exempt_paths: str = Field(default=",".join(GATEWAY_EXEMPT_PATHS), alias="LOCALE_EXEMPT_PATHS")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("locale_profile", "locale_client_hint_header")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("locale_profile")
    @classmethod
    def _known_profile(cls, value: str | None) -> str | None:
        if value is not None and value not in PROFILES:
            raise ValueError(f"Unknown locale profile {value!r}; expected one of {sorted(PROFILES)}")
        return value

    @property
    def exempt_paths(self) -> tuple[str, ...]:
        return _split_csv(self.locale_exempt_paths)

    def gateway_config(self) -> GatewayConfig:
        """Build the immutable gateway configuration for this deployment."""

        if self.locale_profile is not None:
            return replace(
                PROFILES[self.locale_profile],
                cookie_name=self.locale_cookie_name,
                client_hint_header=self.locale_client_hint_header,
                static_extensions=_split_csv(self.locale_static_extensions),
            )
        return GatewayConfig(
            languages=_split_csv(self.locale_supported_languages),
            default_language=self.locale_default_language.strip(),
            cookie_name=self.locale_cookie_name,
            cookie_max_age=self.locale_cookie_max_age,
            client_hint_header=self.locale_client_hint_header,
            static_extensions=_split_csv(self.locale_static_extensions),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
