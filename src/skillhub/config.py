"""Configuration management for the application."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./skillhub.db")
    database_echo: bool = Field(default=False)

    # Token signing
    jwt_secret_key: str = Field(default="skillhub-development-secret-change-me")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60, gt=0)

    # Password hashing cost factor
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # Logging; an empty log_file disables the file handler
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default="app.log")

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


# Global settings instance
settings = Settings()
