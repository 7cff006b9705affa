"""Settings for the ideas spiral FastAPI application."""

from __future__ import annotations

import os
from typing import List

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

# Search for the nearest .env so running from subdirectories still loads root config.
load_dotenv(find_dotenv(usecwd=True))


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _default_cors_origins() -> List[str]:
    raw = os.getenv("IDEAS_CORS_ALLOW_ORIGINS")
    if raw:
        return _split_origins(raw)
    app_url = os.getenv("APP_BASE_URL")
    return [app_url.strip()] if app_url else []


class CoreSettings(BaseModel):
    """API metadata and bind address for the server."""

    api_title: str = "Ideas Spiral API"
    api_version: str = "0.1.0"
    host: str = Field(default_factory=lambda: os.getenv("IDEAS_HOST", "127.0.0.1"))
    port: int = Field(default_factory=lambda: int(os.getenv("IDEAS_PORT", "8000")))
    cors_allow_origins: List[str] = Field(default_factory=_default_cors_origins)


settings = CoreSettings()
