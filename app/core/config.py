"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix under which all routers are mounted.
        rate_limit_default: Default rate limit for all endpoints.
        align_network_error_status: Send name-resolution failures with a
            404 transport status instead of 400, matching the envelope.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Standard API Response"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    rate_limit_default: str = "60/minute"
    align_network_error_status: bool = False


settings = Settings()
