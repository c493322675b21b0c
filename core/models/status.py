# =============================================================================
# core/models/status.py - Health & Status Schemas
# =============================================================================
# These models define the API contract for the operational endpoints:
# - ConnectionState: Database connection lifecycle codes
# - HealthResponse: Liveness payload (GET /)
# - StatusResponse: Readiness snapshot (GET /api/status)
# - StatusErrorResponse: Body returned when the snapshot itself fails
# - ErrorEnvelope: Uniform shape for every other non-2xx response
#
# All timestamps are generated per request and never cached.
# =============================================================================

from datetime import datetime, timezone
from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, Field


NOT_CONNECTED = "not connected"
UNKNOWN_STATE = "unknown"


def utc_timestamp() -> str:
    """Current time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ConnectionState(IntEnum):
    """
    Lifecycle of the database connection.

    The numeric codes follow the common MongoDB ready-state convention, so
    a raw state value read from any tool maps to the same label.

    Flow: disconnected -> connecting -> connected -> disconnecting -> disconnected
    """
    DISCONNECTED = 0
    CONNECTED = 1
    CONNECTING = 2
    DISCONNECTING = 3

    @property
    def label(self) -> str:
        return self.name.lower()


class HealthResponse(BaseModel):
    """Liveness payload. Never depends on external services."""
    message: str = Field(default="API is running...")
    status: Literal["healthy"] = "healthy"
    timestamp: str = Field(default_factory=utc_timestamp)


class DatabaseStatus(BaseModel):
    """Database section of the status snapshot."""
    status: str = Field(..., examples=["connected"])
    name: str = Field(default=NOT_CONNECTED, examples=["e-commerce"])
    host: str = Field(default=NOT_CONNECTED, examples=["cluster0.mongodb.net"])


class StatusResponse(BaseModel):
    """
    Readiness snapshot returned by GET /api/status.

    Example:
        {
            "server": "running",
            "database": {"status": "connected", "name": "e-commerce", "host": "localhost"},
            "cloudinary": "configured",
            "timestamp": "2024-01-15T10:30:00.000Z"
        }
    """
    server: Literal["running"] = "running"
    database: DatabaseStatus
    cloudinary: Literal["configured", "not configured"]
    timestamp: str = Field(default_factory=utc_timestamp)


class StatusErrorResponse(BaseModel):
    """Returned with a 500 when reading dependency state raised."""
    error: str
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorEnvelope(BaseModel):
    """
    Uniform error body.

    `error` is omitted when there is no detail to report (404s); when
    present outside development it is always the redaction string.
    """
    success: Literal[False] = False
    message: str
    error: str | None = None

    def to_content(self) -> dict:
        """Serialize for a JSONResponse, dropping an absent `error`."""
        return self.model_dump(exclude_none=True)
