"""Application settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    app_env: str = "development"
    log_level: str = "INFO"
    catalog_size: int = Field(default=50_000, ge=0)  # Vehicles generated at startup
    catalog_seed: int | None = None  # Fixed seed → same inventory every start

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="AUTOLOT_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
