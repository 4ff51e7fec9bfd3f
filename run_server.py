"""Entry point for running the FastAPI application with Uvicorn."""
from __future__ import annotations

import logging
import os

import uvicorn

from moodshaker.config import get_settings


def main() -> None:
  settings = get_settings()
  logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
  port = int(os.getenv("MOODSHAKER_SERVER_PORT", "8000"))
  reload = os.getenv("UVICORN_RELOAD", "true").lower() == "true"
  uvicorn.run("moodshaker.main:app", host="0.0.0.0", port=port, reload=reload)


if __name__ == "__main__":
  main()
