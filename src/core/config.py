"""Configuration management using Pydantic Settings."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


# Timeout constants (in milliseconds)
BROWSER_TIMEOUT_DEFAULT = 15000
NAVIGATION_TIMEOUT_DEFAULT = 30000
EXPECT_TIMEOUT_DEFAULT = 5000


class Settings(BaseSettings):
    """Suite settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Browser Configuration
    headless: bool = Field(default=True, description="Run browser in headless mode")
    browser_launch_timeout: int = Field(default=60000, description="Browser launch timeout in milliseconds")
    browser_timeout: int = Field(default=BROWSER_TIMEOUT_DEFAULT, description="Default action timeout in milliseconds")
    navigation_timeout: int = Field(default=NAVIGATION_TIMEOUT_DEFAULT, description="Navigation timeout in milliseconds")
    expect_timeout: int = Field(default=EXPECT_TIMEOUT_DEFAULT, description="Timeout for expect() assertions in milliseconds")

    # Booking API Configuration
    api_timeout: float = Field(default=30.0, description="HTTP timeout for booking API calls in seconds")

    # Fixture data overrides
    suite_data_path: Optional[Path] = Field(default=None, description="Alternate fixture data JSON file")
    base_url: Optional[str] = Field(default=None, description="Override for the shop URL in fixture data")
    booking_api_url: Optional[str] = Field(default=None, description="Override for the booking API URL in fixture data")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Use JSON logging format")

    @field_validator("browser_launch_timeout", "browser_timeout", "navigation_timeout", "expect_timeout", "api_timeout")
    @classmethod
    def validate_timeout(cls, v):
        """Timeouts must be positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Validate and normalize log level."""
        if isinstance(v, str):
            v = v.upper()
            if not isinstance(logging.getLevelName(v), int):
                raise ValueError(f"unknown log level: {v}")
        return v

    def __repr__(self):
        """Redact sensitive fields in repr."""
        safe_dict = {}
        for key, value in self.model_dump().items():
            if any(sensitive in key.lower() for sensitive in ["password", "secret", "token"]):
                safe_dict[key] = "***REDACTED***"
            else:
                safe_dict[key] = value
        return f"Settings({safe_dict})"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings: {e}") from e
    return _settings


def reload_settings() -> Settings:
    """Reload settings (useful for testing)."""
    global _settings
    _settings = None
    return get_settings()
