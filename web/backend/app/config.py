"""
Configuration management for the Live TV backend.
Uses pydantic-settings for environment variable loading.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = "Live TV"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS Configuration
    # Default allows all origins for development; set LIVETV_CORS_ORIGINS for production
    cors_origins: list[str] = ["*"]

    # Rate Limiting
    resolve_rate_limit_per_minute: int = 30

    # Stream resolution
    mirror_timeout_ms: int = 6000

    # Mirror id -> base URL for the Sport HD provider, e.g.
    # LIVETV_SPORT_HD_MIRRORS='{"mirror-1": "https://hd1.example.net/live"}'
    # Mirrors without a base URL are listed but never resolve.
    sport_hd_mirrors: dict[str, str] = {}

    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    # Pydantic V2 configuration
    model_config = SettingsConfigDict(env_prefix="LIVETV_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
