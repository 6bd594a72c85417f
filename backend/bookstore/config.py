"""Application configuration and environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Book Store"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
