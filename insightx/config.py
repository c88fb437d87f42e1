"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """InsightX settings, read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "InsightX Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Document store
    DOCUMENT_STORE: Literal["memory", "redis"] = "memory"
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = Field(default="insightx", min_length=1)
    REDIS_CONNECT_TIMEOUT: int = Field(default=5, ge=1, le=60)

    # Collections
    USERS_COLLECTION: str = Field(default="users", min_length=1)
    REPORTS_COLLECTION: str = Field(default="reports", min_length=1)

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Production must not run in debug mode or on the in-memory store."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if self.DOCUMENT_STORE == "memory":
                raise ValueError("DOCUMENT_STORE must be 'redis' in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
