"""
Health check endpoints.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel import Session
from datetime import datetime

from bedboard.config import settings
from bedboard.core.database import check_database_health, get_session
from bedboard.core.websocket_manager import manager
from bedboard.repositories.bed_repo import BedRepository

router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={
        200: {"description": "System healthy"},
        503: {"description": "System unavailable"}
    }
)


@router.get(
    "",
    summary="Health Check",
    description="Checks that the application is running",
    response_model=None
)
async def health_check() -> JSONResponse:
    """
    Basic health check.
    Returns 200 while the application is running.
    """
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "version": settings.APP_VERSION,
        }
    )


@router.get(
    "/readiness",
    summary="Readiness Probe",
    description="Checks that the database is reachable",
    response_model=None
)
def readiness_check(session: Session = Depends(get_session)) -> JSONResponse:
    """
    Readiness check.

    Reports the database status, bed counts per status and the number
    of WebSocket clients.
    """
    db_health = check_database_health()
    ready = db_health.get("status") == "healthy"
    if ready:
        db_health["beds"] = BedRepository(session).count_by_status()

    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now().isoformat(),
            "components": {
                "database": db_health,
                "websocket": {"connections": manager.connection_count},
            }
        }
    )
