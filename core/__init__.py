# =============================================================================
# core/ - Framework-Agnostic Logic
# =============================================================================
# This package contains logic that does not depend on FastAPI:
# - models/: Status payloads, connection states, bootstrap outcome
# - services/: Bootstrap sequencing and the status snapshot
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
