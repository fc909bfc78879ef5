# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().POCKETBASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Credentials are deliberately optional here: a missing POCKETBASE_EMAIL or
# POCKETBASE_PASSWORD is reported through the fetch error path, not as a
# settings validation failure at startup.
# =============================================================================

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for local development

    Access via get_settings(), which caches a single instance.
    """

    # -------------------------------------------------------------------------
    # PocketBase Configuration
    # -------------------------------------------------------------------------

    POCKETBASE_URL: str = Field(
        default="http://127.0.0.1:8090",
        description="PocketBase base URL"
    )

    POCKETBASE_EMAIL: str | None = Field(
        default=None,
        description="Email of the privileged account used to read records"
    )

    POCKETBASE_PASSWORD: SecretStr | None = Field(
        default=None,
        description="Password of the privileged account"
    )

    POCKETBASE_AUTH_COLLECTION: str = Field(
        default="_superusers",
        min_length=1,
        description="Auth collection the privileged account belongs to"
    )

    REQUEST_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for each HTTP request to PocketBase"
    )

    # -------------------------------------------------------------------------
    # Flyer Listing
    # -------------------------------------------------------------------------

    FLYERS_COLLECTION: str = Field(
        default="flyers",
        min_length=1,
        description="Collection to list records from"
    )

    FLYERS_PAGE: int = Field(
        default=1,
        ge=1,
        description="Page to request (1-based)"
    )

    FLYERS_PER_PAGE: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Page size (PocketBase caps perPage at 500)"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    DEBUG: bool = Field(
        default=False,
        description="Enable verbose logging"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty values as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        # .env files often carry keys for other tools
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access. This is the recommended pattern for
    pydantic-settings.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
