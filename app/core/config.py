"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
Engine tunables (readiness thresholds, progression steps...) are not
settings: they travel with each request as explicit config objects.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "LiftPath Training Analytics"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Fatigue/readiness, 1RM projection and progression suggestions."
    AUTHORS: List[str] = ["LiftPath contributors"]

    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Session date format of logged training history
    DATE_FORMAT: str = "%Y/%m/%d"

    # Dev server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
