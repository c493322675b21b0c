# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing here is required: the server must be able to start and answer
    liveness checks even when its dependencies are not configured.
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=4000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # Only the literal "development" discloses error details to clients.
    ENVIRONMENT: str = Field(
        default="production",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
        description="Environment label (development, staging, production, ...)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable verbose logging"
    )

    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated, * for any)"
    )

    MAX_JSON_BODY_BYTES: int = Field(
        default=100 * 1024,
        ge=1,
        description="Largest JSON request body accepted by the body parser"
    )

    # -------------------------------------------------------------------------
    # MongoDB
    # -------------------------------------------------------------------------

    MONGODB_URI: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )

    MONGODB_DB_NAME: str = Field(
        default="e-commerce",
        min_length=1,
        description="Database used by the storefront collections"
    )

    # -------------------------------------------------------------------------
    # Cloudinary (media storage)
    # -------------------------------------------------------------------------
    # Presence of the cloud name is what /api/status reports. The credentials
    # are never validated here.

    CLOUDINARY_CLOUD_NAME: str | None = Field(
        default=None,
        description="Cloudinary cloud name"
    )

    CLOUDINARY_API_KEY: str | None = Field(
        default=None,
        description="Cloudinary API key"
    )

    CLOUDINARY_API_SECRET: str | None = Field(
        default=None,
        description="Cloudinary API secret"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty values count as unset (CLOUDINARY_CLOUD_NAME="" -> not configured)
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:5173, https://shop.example.com"
            -> ["http://localhost:5173", "https://shop.example.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def media_storage_configured(self) -> bool:
        """Whether Cloudinary credentials are present (not whether they work)."""
        return bool(self.CLOUDINARY_CLOUD_NAME)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access. create_app() stores the Settings it is given on
    app.state.settings; tests build their own Settings and pass them to
    create_app() instead of patching this function.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
