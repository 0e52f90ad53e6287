"""
Configuration settings for the Fleet Management API.
Uses Pydantic for type-safe configuration management.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Fleet Management API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./fleet.db"

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # Seed data
    seed_on_startup: bool = True
    seed_vehicle_count: int = 50
    seed_maintenance_count: int = 200
    seed_alert_count: int = 75

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # API
    api_prefix: str = "/api"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
