"""Application settings parsed from environment variables and defaults."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STREAMING_REGION = "US"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "ReelScout API"
    environment: str = "development"
    api_prefix: str = "/api"

    tmdb_api_key: Optional[str] = None
    tmdb_api_auth_header: Optional[str] = None
    omdb_api_key: Optional[str] = None
    watchmode_api_key: Optional[str] = None

    streaming_region: str = DEFAULT_STREAMING_REGION
    http_timeout_seconds: float = 15.0
    log_level: str = "INFO"

    @field_validator("tmdb_api_key", "tmdb_api_auth_header", "omdb_api_key", "watchmode_api_key", mode="before")
    @classmethod
    def _blank_keys_to_none(cls, value: str | None) -> str | None:
        """Treat empty or whitespace-only keys as unset."""
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return value

    @field_validator("streaming_region", mode="before")
    @classmethod
    def _normalize_region(cls, value: str | None) -> str:
        """Fall back to the default region when the value is blank."""
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULT_STREAMING_REGION

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings to avoid re-parsing environment variables."""
    return Settings()


settings = get_settings()
