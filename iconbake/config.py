"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    iconbake_env: str = "development"
    iconbake_log_level: str = "info"

    # Conversion defaults (CLI and API)
    iconbake_flatness: float = 0.25
    iconbake_size: int = 0
    iconbake_upscale: int = 1
    iconbake_prefix: str = "vg_icon_"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
