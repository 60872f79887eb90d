"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.config import Settings
from api.dependencies import get_settings, get_user_repo
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(
    settings: Settings = Depends(get_settings),
    repo: UserRepository = Depends(get_user_repo),
):
    """Health check endpoint with storage backend status."""
    backend = settings.storage_backend
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {},
    }

    try:
        healthy = repo.ping()
        message = "Connection successful" if healthy else "Connection failed"
    except Exception as e:
        healthy = False
        message = f"Connection error: {str(e)[:200]}"

    health_status["services"][backend] = {
        "status": "healthy" if healthy else "unhealthy",
        "message": message,
    }

    if not healthy:
        health_status["status"] = "degraded"
        logger.warning("Storage backend unhealthy", extra={"backend": backend})

    return JSONResponse(
        content=health_status,
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
