"""12-factor configuration adapter using environment variables."""

import logging

import pytz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from skane_departures import __version__
from skane_departures.adapters.skanetrafiken_api.constants import (
    SKANETRAFIKEN_BASE_URL,
    SKANETRAFIKEN_TIMEZONE,
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Skånetrafiken API configuration
    skanetrafiken_base_url: str = Field(
        default=SKANETRAFIKEN_BASE_URL,
        description="Base URL of the Skånetrafiken Open API, operations are appended to it",
    )
    skanetrafiken_timezone: str = Field(
        default=SKANETRAFIKEN_TIMEZONE,
        description="Civil timezone the feed reports departure times in (IANA name)",
    )

    # HTTP configuration
    http_timeout_seconds: float = Field(
        default=10.0, description="Timeout for API requests in seconds"
    )
    http_user_agent: str = Field(
        default=f"skane-departures/{__version__}",
        description="User-Agent header sent with every request",
    )
    min_delay_seconds_between_calls: float = Field(
        default=0.0,
        description="Minimum delay between API calls in seconds (0 disables rate limiting)",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Log level for the CLI")

    @field_validator("skanetrafiken_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL ends with a slash so operations can be appended."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("skanetrafiken_base_url must be an http(s) URL")
        return v if v.endswith("/") else f"{v}/"

    @field_validator("skanetrafiken_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        if v not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        return v

    @field_validator("min_delay_seconds_between_calls")
    @classmethod
    def validate_min_delay(cls, v: float) -> float:
        """Validate delay is not negative."""
        if v < 0:
            raise ValueError("min_delay_seconds_between_calls must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_timezone(self) -> pytz.BaseTzInfo:
        """Return the feed timezone as a pytz zone."""
        return pytz.timezone(self.skanetrafiken_timezone)
