"""Middleware exports."""
from __future__ import annotations

from .locale_gateway import LocaleGatewayMiddleware

__all__ = ["LocaleGatewayMiddleware"]
