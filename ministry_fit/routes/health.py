"""
Health check endpoints.
"""
import time
import logging
from fastapi import APIRouter

from ministry_fit.core.question_bank import QUESTION_BANK
from ministry_fit.core.ministries import MINISTRY_CATALOG
from ministry_fit.core.settings import settings

logger = logging.getLogger("app.health")
router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "version": settings.app_version,
    }


@router.get("/health/detailed")
async def detailed_health_check():
    """Health plus the size of the loaded scoring tables."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "version": settings.app_version,
        "tables": {
            "questions": len(QUESTION_BANK),
            "ministries": len(MINISTRY_CATALOG),
        },
    }


@router.get("/live")
async def liveness_check():
    """Kubernetes-style liveness probe."""
    return {"status": "alive", "timestamp": time.time()}
