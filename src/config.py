"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=3306)
    db_user: str | None = Field(default=None)
    db_pass: str | None = Field(default=None)
    db_name: str = Field(default="form_demo")
    # Full SQLAlchemy URL, takes precedence over the DB_* values when set
    database_url: str | None = Field(default=None)
    db_pool_size: int = Field(default=10, ge=1)
    # Seconds to wait for a pooled connection; None waits indefinitely
    db_pool_timeout: float | None = Field(default=None, gt=0)

    # Server
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=8000)

    # API
    environment: str = Field(default="development")
    expose_user_listing: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has database credentials."""
        if self.environment == "production":
            if self.database_url is None and not self.db_user:
                raise ValueError("DB_USER or DATABASE_URL must be set in production")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
