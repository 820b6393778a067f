"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

ScaleCenterMode = Literal["raw", "compose"]


class Settings(BaseSettings):
    vectordiff_env: str = "development"
    vectordiff_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # "raw" emits scale(sx sy) and leaves the center to the renderer,
    # "compose" emits translate(cx cy) scale(sx sy) translate(-cx -cy)
    scale_center_mode: ScaleCenterMode = "raw"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
