# =============================================================================
# lib/ - External Service Clients
# =============================================================================
# This package wraps the storefront's external dependencies:
# - mongodb_client.py: MongoDB connection and its lifecycle state
# - cloudinary_client.py: Cloudinary SDK configuration
# - utils.py: Shared error types
#
# Each module exposes one process-wide instance used by app.main.
# =============================================================================

from lib.utils import ApplicationError, DependencyConnectionError

__all__ = [
    "ApplicationError",
    "DependencyConnectionError",
]
