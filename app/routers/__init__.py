# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Liveness (/) and readiness (/api/status) endpoints
# - user.py: User domain routes, mounted under /api/user
# - product.py: Product domain routes, mounted under /api/product
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import user
from . import product

__all__ = [
    "health",
    "user",
    "product",
]
