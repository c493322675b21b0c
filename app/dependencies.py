# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The collaborators live on app.state (set by create_app) so tests can build
# an app around fakes without touching the process-wide instances.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.status_service import DatabaseStateReader, MediaStorageReader


def get_database(request: Request) -> DatabaseStateReader:
    """Read-only handle on the database connection."""
    return request.app.state.database


def get_media_storage(request: Request) -> MediaStorageReader:
    """Read-only handle on the media storage configuration."""
    return request.app.state.media_storage


# Type aliases for dependency injection
DatabaseDep = Annotated[DatabaseStateReader, Depends(get_database)]
MediaStorageDep = Annotated[MediaStorageReader, Depends(get_media_storage)]
