# =============================================================================
# core/models/ - Data Models
# =============================================================================
# - status.py: Connection states, health/status payloads, error envelope
# - bootstrap.py: Result of the startup dependency sequence
# =============================================================================

from .bootstrap import BootstrapOutcome
from .status import (
    ConnectionState,
    DatabaseStatus,
    ErrorEnvelope,
    HealthResponse,
    StatusErrorResponse,
    StatusResponse,
)

__all__ = [
    "BootstrapOutcome",
    "ConnectionState",
    "DatabaseStatus",
    "ErrorEnvelope",
    "HealthResponse",
    "StatusErrorResponse",
    "StatusResponse",
]
