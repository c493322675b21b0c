# =============================================================================
# lib/cloudinary_client.py - Cloudinary Media Storage
# =============================================================================
# Applies the Cloudinary credentials to the SDK's global configuration.
# Product image uploads use the configured SDK directly.
#
# Usage:
#   from lib.cloudinary_client import cloudinary_storage
#   await cloudinary_storage.connect()
# =============================================================================

from __future__ import annotations

import logging

import cloudinary

from app.config import Settings, settings
from lib.utils import DependencyConnectionError

logger = logging.getLogger(__name__)


class MediaStorageConfigError(DependencyConnectionError):
    """Raised when the Cloudinary SDK rejects the configuration."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault(
            "suggestion",
            "Check CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET",
        )
        super().__init__(message, code="MEDIA_STORAGE_CONFIG_FAILED", **kwargs)


class CloudinaryStorage:
    """
    Configures the Cloudinary SDK from application settings.

    connect() makes no network call and does not check that the
    credentials are valid; Cloudinary reports bad credentials on the
    first upload.
    """

    def __init__(self, config: Settings):
        self._settings = config
        self._connected = False

    @property
    def is_configured(self) -> bool:
        """Whether credentials are present in configuration."""
        return self._settings.media_storage_configured

    @property
    def connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        """
        Push the credentials into the SDK.

        Raises:
            MediaStorageConfigError: If the SDK rejects the configuration
        """
        if not self.is_configured:
            logger.warning("Cloudinary credentials are not set; media uploads will fail")

        try:
            cloudinary.config(
                cloud_name=self._settings.CLOUDINARY_CLOUD_NAME,
                api_key=self._settings.CLOUDINARY_API_KEY,
                api_secret=self._settings.CLOUDINARY_API_SECRET,
                secure=True,
            )
        except Exception as e:
            raise MediaStorageConfigError(f"Failed to configure Cloudinary: {e}") from e

        self._connected = True
        logger.debug(f"Cloudinary SDK configured for cloud {self._settings.CLOUDINARY_CLOUD_NAME!r}")


# Process-wide media storage
cloudinary_storage = CloudinaryStorage(settings)
