# =============================================================================
# app/routers/product.py - Product Routes
# =============================================================================
# Mount point for the product catalog handlers (add, list, remove, single).
# Mounted under /api/product; responses pass through unmodified.
# =============================================================================

from fastapi import APIRouter

router = APIRouter()
