# =============================================================================
# core/services/status_service.py - Readiness Snapshot
# =============================================================================
# Builds the /api/status payload from the live database state and the
# media storage configuration. Pure reads: no network calls, no writes.
# =============================================================================

from typing import Protocol

from core.models.status import (
    NOT_CONNECTED,
    UNKNOWN_STATE,
    ConnectionState,
    DatabaseStatus,
    StatusResponse,
)


class DatabaseStateReader(Protocol):
    """Read-only view of the database connection."""

    @property
    def ready_state(self) -> int: ...

    @property
    def database_name(self) -> str | None: ...

    @property
    def host(self) -> str | None: ...


class MediaStorageReader(Protocol):
    """Read-only view of the media storage configuration."""

    @property
    def is_configured(self) -> bool: ...


def describe_state(value: object) -> str:
    """
    Map a raw connection state to its label.

    Anything that is not one of the four known codes maps to "unknown".

    Example:
        describe_state(1)     # "connected"
        describe_state(99)    # "unknown"
        describe_state(None)  # "unknown"
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return UNKNOWN_STATE
    try:
        return ConnectionState(value).label
    except ValueError:
        return UNKNOWN_STATE


class StatusInspector:
    """
    Computes a fresh StatusResponse on every call.

    Safe to call before the database has connected: missing name or host
    are reported as "not connected".
    """

    def __init__(self, database: DatabaseStateReader, media_storage: MediaStorageReader):
        self.database = database
        self.media_storage = media_storage

    def get_status(self) -> StatusResponse:
        return StatusResponse(
            database=DatabaseStatus(
                status=describe_state(self.database.ready_state),
                name=self.database.database_name or NOT_CONNECTED,
                host=self.database.host or NOT_CONNECTED,
            ),
            cloudinary="configured" if self.media_storage.is_configured else "not configured",
        )
