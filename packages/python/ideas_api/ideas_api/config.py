"""Configuration for the ideas API package."""

import os

from pydantic import BaseModel, Field


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class IdeasApiSettings(BaseModel):
    """Settings for the in-memory idea workspaces."""

    default_workspace_id: str = Field(
        default_factory=lambda: os.getenv("IDEAS_DEFAULT_WORKSPACE", "home_workspace")
    )
    seed_sample_ideas: bool = Field(default_factory=lambda: _env_flag("IDEAS_SEED_SAMPLE", "true"))


settings = IdeasApiSettings()
