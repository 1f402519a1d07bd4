"""Configuration management for the TMDb checks."""

from functools import lru_cache
from urllib.parse import urlparse

from pydantic import PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # TMDB
    tmdb_api_key: str
    tmdb_base_url: str = "https://api.themoviedb.org/3/"

    # Network settings
    request_timeout: PositiveFloat = 30.0  # Per-request timeout in seconds

    @field_validator("tmdb_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError("TMDB base URL must use http or https")
        if not parsed.netloc:
            raise ValueError("TMDB base URL must have a host")
        # Resource paths are appended directly
        if not v.endswith("/"):
            v = f"{v}/"
        return v

    # App settings
    debug: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
