"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - available_features=None means the full Feature enum is available

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - available_features kept as a raw string (CSV or JSON list): the feature
      registry owns the parsing and reports unknown names as ConfigurationError
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Feature registry
    available_features: str | None = None

    @field_validator("available_features", mode="before")
    @classmethod
    def blank_means_all(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
