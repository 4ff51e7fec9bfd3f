"""Aggregate router exports."""
from .cocktails import router as cocktails_router
from .languages import router as languages_router

__all__ = ["cocktails_router", "languages_router"]
