# =============================================================================
# app/routers/user.py - User Routes
# =============================================================================
# Mount point for the user domain handlers (registration, login, admin
# login). Mounted under /api/user; responses pass through unmodified.
# =============================================================================

from fastapi import APIRouter

router = APIRouter()
