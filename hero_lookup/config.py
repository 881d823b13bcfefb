"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - base_path always has a leading slash and no trailing slash

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the service starts with no environment at all
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hero_lookup.core.hero_routes import DEFAULT_BASE_PATH, normalize_base_path


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Routing
    base_path: str = DEFAULT_BASE_PATH

    @field_validator("base_path", mode="before")
    @classmethod
    def clean_base_path(cls, v: str) -> str:
        if isinstance(v, str):
            return normalize_base_path(v)
        return v

    # Data (standalone app only; embedders pass their own store)
    hero_data_file: str | None = None

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
