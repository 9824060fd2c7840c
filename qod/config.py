"""
Application configuration management using Pydantic Settings.

This module provides centralized configuration for the entire application,
loading values from environment variables and .env files with validation.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    Optional Settings (with defaults):
        database_url: SQLAlchemy connection string
        db_echo: Whether to echo SQL queries (useful for debugging)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        cors_allow_origin: Production CORS origin (if None, uses dev defaults)
        qod_seed: Seed for the quote of the day generator (if None, seeded from the OS)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    database_url: str = "sqlite:///./qod.db"
    db_echo: bool = False
    log_level: str = "INFO"
    cors_allow_origin: str | None = None
    qod_seed: int | None = None


# Create global settings instance
settings = Settings()
