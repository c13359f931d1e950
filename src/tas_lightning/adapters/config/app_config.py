"""12-factor configuration adapter using environment variables and an optional .env file."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tas_lightning.adapters.arcgis_api.constants import GA_TRANSMISSION_LINES_QUERY_URL
from tas_lightning.adapters.xweather_api.constants import (
    XWEATHER_API_BASE_URL,
    XWEATHER_STRIKE_LIMIT,
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3001, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")

    # Xweather lightning API configuration
    xweather_client_id: str | None = Field(
        default=None, description="Xweather client ID (XWEATHER_CLIENT_ID)"
    )
    xweather_client_secret: str | None = Field(
        default=None, description="Xweather client secret (XWEATHER_CLIENT_SECRET)"
    )
    xweather_base_url: str = Field(
        default=XWEATHER_API_BASE_URL, description="Base URL of the Xweather lightning endpoint"
    )
    xweather_timeout_seconds: float = Field(
        default=10, description="Timeout for a single Xweather request in seconds"
    )
    xweather_strike_limit: int = Field(
        default=XWEATHER_STRIKE_LIMIT, description="Maximum strikes requested per station"
    )
    xweather_max_concurrent_requests: int = Field(
        default=0,
        description="Maximum Xweather requests in flight during a scan (0 for no limit)",
    )

    # Transmission lines (ArcGIS) configuration
    lines_service_url: str = Field(
        default=GA_TRANSMISSION_LINES_QUERY_URL,
        description="ArcGIS query endpoint of the transmission line layer",
    )
    lines_timeout_seconds: float = Field(
        default=20, description="Timeout for a single mapping service request in seconds"
    )

    # Stations and static assets
    stations_file: str = Field(
        default="stations.json", description="Path to the JSON list of monitored stations"
    )
    static_dir: str = Field(
        default="public", description="Directory of static files served at the site root"
    )

    # Scan defaults used when the query string leaves them out
    default_minutes: float = Field(default=15, description="Default scan window in minutes")
    default_radius_km: float = Field(default=50, description="Default scan radius in kilometres")

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of API requests allowed per IP address per minute",
    )

    @field_validator(
        "xweather_timeout_seconds",
        "lines_timeout_seconds",
        "default_minutes",
        "default_radius_km",
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate that timeouts and scan defaults are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("xweather_max_concurrent_requests")
    @classmethod
    def validate_concurrency(cls, v: int) -> int:
        """Validate the concurrency cap is 0 (unbounded) or positive."""
        if v < 0:
            raise ValueError("xweather_max_concurrent_requests must be >= 0")
        return v

    @property
    def has_xweather_credentials(self) -> bool:
        return bool(self.xweather_client_id and self.xweather_client_secret)
