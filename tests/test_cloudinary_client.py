# =============================================================================
# tests/test_cloudinary_client.py - Cloudinary Storage Tests
# =============================================================================
# Tests for CloudinaryStorage. The SDK config call is patched.
# =============================================================================

import logging
from unittest.mock import patch

import pytest

from lib.cloudinary_client import CloudinaryStorage, MediaStorageConfigError


class TestIsConfigured:
    """Presence check only."""

    def test_configured_when_cloud_name_set(self, make_settings):
        assert CloudinaryStorage(make_settings(CLOUDINARY_CLOUD_NAME="storefront")).is_configured is True

    def test_not_configured_when_unset(self, make_settings):
        assert CloudinaryStorage(make_settings()).is_configured is False

    def test_empty_cloud_name_not_configured(self, make_settings):
        assert CloudinaryStorage(make_settings(CLOUDINARY_CLOUD_NAME="")).is_configured is False


class TestConnect:
    """Applying credentials to the SDK."""

    async def test_pushes_credentials_to_sdk(self, make_settings):
        storage = CloudinaryStorage(make_settings(
            CLOUDINARY_CLOUD_NAME="storefront",
            CLOUDINARY_API_KEY="key-123",
            CLOUDINARY_API_SECRET="shh",
        ))

        with patch("lib.cloudinary_client.cloudinary.config") as config:
            await storage.connect()

        config.assert_called_once_with(
            cloud_name="storefront",
            api_key="key-123",
            api_secret="shh",
            secure=True,
        )
        assert storage.connected is True

    async def test_missing_credentials_warns_but_connects(self, make_settings, caplog):
        storage = CloudinaryStorage(make_settings())

        with patch("lib.cloudinary_client.cloudinary.config"):
            with caplog.at_level(logging.WARNING, logger="lib.cloudinary_client"):
                await storage.connect()

        assert storage.connected is True
        assert "credentials are not set" in caplog.text

    async def test_sdk_rejection_raises(self, make_settings):
        storage = CloudinaryStorage(make_settings(CLOUDINARY_CLOUD_NAME="storefront"))

        with patch("lib.cloudinary_client.cloudinary.config", side_effect=ValueError("bad option")):
            with pytest.raises(MediaStorageConfigError, match="bad option"):
                await storage.connect()

        assert storage.connected is False
