# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .bootstrap_service import Bootstrapper
from .status_service import StatusInspector, describe_state

__all__ = [
    "Bootstrapper",
    "StatusInspector",
    "describe_state",
]
