# src/config.py
"""Application configuration using pydantic-settings.

Provides a centralized Settings class for all environment variables.
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are loaded from .env file and environment variables.
    Environment variables take precedence over .env file values.
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Emit JSON lines instead of plain text

    # Strategy picked first by the prioritization demo
    default_strategy: str = "alphabetical"

    # Observability
    logfire_token: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        case_sensitive=False,  # Allow case-insensitive env var names
    )

    @property
    def log_level_value(self) -> int:
        """Get the numeric logging level.

        Unknown level names fall back to INFO.

        Returns:
            Logging level as an int (e.g. logging.DEBUG).
        """
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


# Singleton instance - import this in your code
settings = Settings()
