"""
Soundshelf Backend Configuration
Environment-driven settings
"""

from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Service identity
    APP_NAME: str = Field(default="Soundshelf API", description="Service name")
    APP_VERSION: str = Field(default="1.0.0", description="Server build version")
    API_VERSION: str = Field(default="1.0", description="Version stamped into every response")
    API_PREFIX: str = Field(default="/api/v1", description="Mount prefix for resource routes")

    # Pagination defaults
    DEFAULT_PAGE: int = Field(default=1, description="Page used when none is given")
    DEFAULT_LIMIT: int = Field(default=10, description="Page size used when none is given")

    # Catalog source
    CATALOG_PATH: str = Field(default="", description="JSON catalog path (tracks/artists/playlists)")
    SAMPLE_DATA_FALLBACK: bool = Field(
        default=True,
        description="Serve the built-in sample catalog when CATALOG_PATH is unset or unreadable"
    )

    # CORS
    CORS_ORIGINS: List[str] = Field(default=["http://localhost:3000"], description="Allowed origins")

    # Admin gate (HTTP Basic on /admin/*)
    ADMIN_USERNAME: str = Field(default="admin", description="Admin username")
    ADMIN_PASSWORD: str = Field(default="secret", description="Admin password")

    # Server / logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    HOST: str = Field(default="0.0.0.0", description="Bind host")
    PORT: int = Field(default=8000, description="Bind port")
    SLOW_REQUEST_SEC: float = Field(default=1.0, ge=0.0, description="Slow request warning threshold")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


def get_settings() -> Settings:
    return Settings()
