"""FastAPI application composing the ideas API router."""

from __future__ import annotations

import os
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ideas_api import router as ideas_router

from .config import settings


def _configure_logging() -> None:
    level = os.getenv("LOG_LEVEL") or os.getenv("LOGURU_LEVEL") or "INFO"
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    logger.info("Logger configured at {level} level", level=level.upper())


_configure_logging()

app = FastAPI(title=settings.api_title, version=settings.api_version)

# Allow the front-end origins (with credentials) to talk to this API.
if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("CORS middleware added {origins}", origins=settings.cors_allow_origins)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Simple liveness endpoint for load balancers and probes."""

    return {"status": "ok"}


app.include_router(ideas_router)


def run() -> None:
    """Entry point for ``ideas-spiral-server``."""

    uvicorn.run("core_server.main:app", host=settings.host, port=settings.port)
