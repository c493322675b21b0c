# =============================================================================
# app/routers/health.py - Health & Status Endpoints
# =============================================================================
# Two distinct checks:
# - GET /            liveness: the process answers, nothing else is checked
# - GET /api/status  readiness: live database state and media storage config
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import DatabaseDep, MediaStorageDep
from core.models.status import HealthResponse, StatusErrorResponse, StatusResponse
from core.services.status_service import StatusInspector

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check():
    """
    Liveness endpoint.

    Always 200, whatever the state of the dependencies.
    """
    return HealthResponse()


@router.get(
    "/api/status",
    response_model=StatusResponse,
    responses={500: {"model": StatusErrorResponse}},
)
async def status_check(database: DatabaseDep, media_storage: MediaStorageDep):
    """
    Readiness snapshot.

    Reports the database connection state, database name and host, and
    whether Cloudinary credentials are present. Safe to call while the
    bootstrap sequence is still running.
    """
    try:
        return StatusInspector(database, media_storage).get_status()
    except Exception as e:
        logger.exception(f"Status inspection failed: {e}")
        return JSONResponse(
            status_code=500,
            content=StatusErrorResponse(error=str(e)).model_dump(),
        )
