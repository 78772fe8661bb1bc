"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Devotion Companion"
    VERSION: str = "0.1.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./devotion.db"

    # Fasting sessions
    FASTING_MIN_GOAL_HOURS: int = 1
    FASTING_MAX_GOAL_HOURS: int = 72
    FASTING_OVERWRITE_ACTIVE: bool = False
    FASTING_POLL_INTERVAL_SECONDS: float = 60.0

    # Remote store client
    STORE_BASE_URL: str = "http://localhost:8000/api/v1"
    STORE_TIMEOUT_SECONDS: float = 10.0

    # Devotional plan
    DEVOTIONAL_DAYS: int = 30

    # Local reminder preferences
    PREFERENCES_PATH: str = "reminders.json"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
