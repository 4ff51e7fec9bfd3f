"""Application entry point for the FastAPI backend."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from .config import get_settings
from .middleware import LocaleGatewayMiddleware
from .routers import cocktails_router, languages_router

logger = logging.getLogger(__name__)

settings = get_settings()
APP_NAME = settings.app_name
API_VERSION = settings.api_version
GATEWAY_CONFIG = settings.gateway_config()

app = FastAPI(title=APP_NAME, version=API_VERSION)

app.add_middleware(
    LocaleGatewayMiddleware,
    config=GATEWAY_CONFIG,
    exempt_paths=settings.exempt_paths,
)

app.include_router(languages_router)
app.include_router(cocktails_router)


@app.on_event("startup")
async def _startup() -> None:
    logger.info(
        "Locale gateway ready (languages=%s, default=%s, cookie=%s, max_age=%d)",
        ",".join(GATEWAY_CONFIG.languages),
        GATEWAY_CONFIG.default_language,
        GATEWAY_CONFIG.cookie_name,
        GATEWAY_CONFIG.cookie_max_age,
    )


@app.get("/health", tags=["system"])
def healthcheck() -> dict[str, str]:
    return {"service": APP_NAME, "version": API_VERSION}
