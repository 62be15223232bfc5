"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the bloglist backend application.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
NO_BLOGS = "no blogs"
MAX_LIKES = 2**31 - 1  # signed 32-bit INTEGER column


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production", "test"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # JWT Configuration
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "bloglist-backend"
    JWT_AUDIENCE: str = "bloglist-clients"

    # Password hashing (argon2id)
    PASSWORD_MIN_LENGTH: int = 3
    ARGON2_MEMORY_COST: int = 19456  # KiB
    ARGON2_TIME_COST: int = 2
    ARGON2_PARALLELISM: int = 1


class LimiterConfig(BaseSettings):
    """Rate limiter configuration passed straight to slowapi's Limiter."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    storage_uri: str = "memory://"
    default_limits: list[str] = ["200/minute"]
    headers_enabled: bool = False
    enabled: bool = True


settings = Settings()
