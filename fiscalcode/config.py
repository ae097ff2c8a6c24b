"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Core never reads settings; only the HTTP shell does

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box locally
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API
    service_name: str = "fiscalcode-api"
    service_version: str = "1.0.0"
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = ["http://localhost:5173"]

    @field_validator("api_prefix", mode="before")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Accept "api/v1" or "/api/v1/" — routes expect a leading slash only."""
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            if v and not v.startswith("/"):
                v = "/" + v
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
