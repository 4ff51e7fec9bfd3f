"""Middleware that routes unprefixed page requests to a language path."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from ..services.locale_gateway import (
    GatewayConfig,
    PassThrough,
    RequestDescriptor,
    decide,
    path_language,
)

logger = logging.getLogger(__name__)


class LocaleGatewayMiddleware(BaseHTTPMiddleware):
    """Redirect requests without a language segment and persist the chosen language.

    Notes:
    - Exempt prefixes (API routes, build assets, favicon) never reach the gateway.
    - Language-prefixed requests expose their language on ``request.state.language``.
    """

    def __init__(self, app: ASGIApp, *, config: GatewayConfig, exempt_paths: Sequence[str] | None = None) -> None:
        super().__init__(app)
        self._config = config
        self._exempt_paths = tuple(exempt_paths or ())

    def _should_skip(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self._exempt_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if self._should_skip(path):
            return await call_next(request)

        descriptor = RequestDescriptor(
            path=path,
            cookies=dict(request.cookies),
            headers=dict(request.headers),
        )
        decision = decide(descriptor, self._config)

        if isinstance(decision, PassThrough):
            language = path_language(path, self._config.languages)
            if language is not None:
                request.state.language = language
            return await call_next(request)

        target = decision.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.debug("Locale redirect %s -> %s", path, target)

        response = RedirectResponse(target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
        cookie = decision.cookie
        response.set_cookie(
            cookie.name,
            cookie.value,
            max_age=cookie.max_age,
            path=cookie.path,
            samesite="lax",
        )
        return response


__all__: Iterable[str] = ["LocaleGatewayMiddleware"]
