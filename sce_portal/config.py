# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "SCE Portal"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # Storage
    DATABASE_URL: str = "sqlite:///./sce_portal.db"
    STORAGE_PREFIX: str = "sce-"

    # Client profile cookie, one session slot per profile
    PROFILE_COOKIE_NAME: str = "sce_profile"
    PROFILE_COOKIE_MAX_AGE: int = 86400 * 30
    PROFILE_COOKIE_SECURE: bool = False

    # Prototype only: store and compare raw passwords instead of bcrypt digests.
    # Real deployments must leave this off.
    ALLOW_PLAINTEXT_PASSWORDS: bool = False


settings = Settings()
