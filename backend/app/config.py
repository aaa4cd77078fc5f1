"""
Configuration settings for the BoutiqueChat backend.

Loads environment variables from .env file and provides typed configuration.
"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:8081", "http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Security Configuration
    SECRET_KEY: str = Field(
        default="b1f4e0c2a7d94c3e8f6a5b2d1c0e9f8a7b6c5d4e3f2a1b0c9d8e7f6a5b4c3d2e",
        description="Secret key for JWT",
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60, description="Access token expiration time in minutes"
    )
    LOGIN_RATE_LIMIT: str = Field(
        default="5/minute", description="Rate limit for the token endpoint"
    )

    # Database Configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./data/boutique.db", description="SQLite database URL"
    )
    DATABASE_ECHO: bool = Field(
        default=False, description="Echo SQL queries (for debugging)"
    )

    # Image hosting (ImgBB)
    IMGBB_UPLOAD_URL: str = Field(
        default="https://api.imgbb.com/1/upload", description="ImgBB upload endpoint"
    )
    IMAGE_UPLOAD_TIMEOUT: float = Field(
        default=30.0, description="Image host request timeout in seconds"
    )
    MAX_UPLOAD_SIZE: int = Field(
        default=32 * 1024 * 1024,  # ImgBB limit
        description="Maximum image upload size in bytes",
    )
    ALLOWED_IMAGE_TYPES: List[str] = Field(
        default=["image/jpeg", "image/png", "image/gif", "image/webp"],
        description="Accepted content types for image uploads",
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    ENABLE_FILE_LOGGING: bool = Field(
        default=False, description="Enable logging to file"
    )
    LOG_DIR: str = Field(default="./logs", description="Directory for log files")


# Global settings instance
settings = Settings()
