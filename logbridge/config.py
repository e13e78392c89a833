"""Configuration loading for the logbridge telemetry adapter.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Adapter configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Every variable carries the
    ``LOGBRIDGE_`` prefix (e.g. ``LOGBRIDGE_INSTRUMENTATION_KEY``).
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Telemetry client configuration
    instrumentation_key: str = Field(
        description="Application Insights instrumentation key",
    )
    endpoint_url: str = Field(
        default="",
        description="Ingestion endpoint URL (empty uses the client default)",
    )
    channel_mode: Literal["synchronous", "asynchronous"] = Field(
        default="asynchronous",
        description="Telemetry channel mode",
    )

    # Handler configuration
    logger_name: str = Field(
        default="",
        description="Logger the handler is attached to (empty for root)",
    )
    handler_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="DEBUG",
        description="Minimum level forwarded to telemetry",
    )
    log_format: str = Field(
        default="%(message)s",
        description="Formatter pattern used to render trace messages",
    )

    # Translation configuration
    property_label_suffix: str = Field(
        default=": ",
        description="Suffix appended to fixed property labels",
    )
    reserved_property_prefix: str = Field(
        default="log4net",
        description="Context property key prefix that is never forwarded",
    )
    trace_fallback_message: str = Field(
        default="Log4Net Trace",
        description="Trace message used when an event has no message",
    )

    @field_validator("instrumentation_key")
    @classmethod
    def validate_instrumentation_key(cls, v: str) -> str:
        """Ensure the instrumentation key is not blank."""
        if not v or not v.strip():
            raise ValueError("instrumentation_key must be a non-empty string")
        return v.strip()

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Ensure a configured endpoint is an http(s) URL."""
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("endpoint_url must start with http:// or https://")
        return v

    @field_validator("trace_fallback_message")
    @classmethod
    def validate_trace_fallback_message(cls, v: str) -> str:
        """Ensure the fallback trace message is not empty."""
        if not v:
            raise ValueError("trace_fallback_message must be non-empty")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load adapter settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "load_settings"]
