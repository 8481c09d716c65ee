"""
Configuration management for the Country Directory backend.
Uses pydantic-settings for environment variable loading.
"""
from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = "Country Directory"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Configuration
    # Default allows all origins for development; set COUNTRIES_CORS_ORIGINS for production
    cors_origins: list[str] = ["*"]

    # Rate Limiting
    rate_limit_per_minute: int = 100

    # Data Source (REST Countries API)
    # /all rejects requests without a field list (10 fields max)
    countries_api_url: str = (
        "https://restcountries.com/v3.1/all"
        "?fields=name,flags,capital,population,languages,currencies,area,region,continents,maps"
    )

    # None waits on the upstream indefinitely
    fetch_timeout_seconds: Optional[float] = None

    # Pydantic V2 configuration
    model_config = SettingsConfigDict(env_prefix="COUNTRIES_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
