"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

import re
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        description="Async SQLAlchemy connection string (e.g. postgresql+asyncpg://...)",
    )
    database_schema: str | None = Field(
        default=None,
        description="PostgreSQL schema for isolated environments (e.g., pr_42)",
    )

    @field_validator("database_schema")
    @classmethod
    def validate_database_schema(cls, v: str | None) -> str | None:
        if v is None:
            return None
        if not re.match(r"^[a-z_][a-z0-9_]{0,62}$", v):
            msg = "Invalid database_schema: must match ^[a-z_][a-z0-9_]{0,62}$"
            raise ValueError(msg)
        return v

    # Geocoding
    geocoder_provider: Literal["google", "nominatim"] = Field(
        default="google",
        description="Provider used to resolve free-text location queries",
    )
    geocode_api_key: str | None = Field(
        default=None,
        description="Google Maps Geocoding API key",
    )
    geocoder_google_timeout: float = Field(
        default=10.0,
        description="Google Maps request timeout in seconds",
        gt=0,
    )
    geocoder_nominatim_email: str = Field(
        default="",
        description="Email for Nominatim usage policy compliance",
    )
    geocoder_nominatim_timeout: float = Field(
        default=10.0,
        description="Nominatim request timeout in seconds",
        gt=0,
    )

    # Resource providers
    weather_api_key: str | None = Field(
        default=None,
        description="API key for the Dark Sky compatible forecast service",
    )
    weather_base_url: str = Field(
        default="https://api.pirateweather.net",
        description="Base URL of a Dark Sky compatible forecast service",
    )
    eventbrite_api_key: str | None = Field(
        default=None,
        description="Eventbrite API token",
    )
    movie_api_key: str | None = Field(
        default=None,
        description="The Movie Database (TMDB) API key",
    )
    yelp_api_key: str | None = Field(
        default=None,
        description="Yelp Fusion API key",
    )
    provider_timeout: float = Field(
        default=10.0,
        description="Request timeout in seconds for resource providers",
        gt=0,
    )

    @field_validator("weather_base_url")
    @classmethod
    def validate_weather_base_url(cls, v: str) -> str:
        return v.rstrip("/")

    # Cache freshness windows (seconds)
    cache_ttl_weather: int = Field(
        default=15,
        description="Seconds a cached weather batch stays fresh",
        gt=0,
    )
    cache_ttl_events: int = Field(
        default=60 * 60,
        description="Seconds a cached events batch stays fresh",
        gt=0,
    )
    cache_ttl_movies: int = Field(
        default=60 * 60 * 24,
        description="Seconds a cached movies batch stays fresh",
        gt=0,
    )
    cache_ttl_reviews: int = Field(
        default=60 * 60 * 4,
        description="Seconds a cached reviews batch stays fresh",
        gt=0,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit every stderr log record as a JSON object",
    )

    # CORS
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
